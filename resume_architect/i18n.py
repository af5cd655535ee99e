"""i18n.py
Localized UI strings for the two supported languages ("en", "zh").
"""

# Literal values an end date may hold to mean "currently ongoing"
PRESENT_SENTINELS = ("Present", "至今", "Ongoing", "进行中")

# The sentinel written when the "currently ongoing" box is ticked
PRESENT_VALUE = {"en": "Present", "zh": "至今"}

# Names used when instructing the translation model
LANGUAGE_NAMES = {"en": "English", "zh": "Simplified Chinese"}

APP_STRINGS = {
    "en": {
        "appTitle": "AI Resume Architect",
        "uploadBtn": "Upload Resume (PDF/Word/Img)",
        "uploadTooltip": "Supports PDF, Word, Images",
        "analyzing": "Analyzing...",
        "exportBtn": "Export PDF",
        "exporting": "Generating PDF...",
        "selectTemplate": "Choose Template",
        "parseError": "Could not extract data from this file. Please try a different file or fill manually.",
        "fileSizeError": "File is too large. Please upload a file smaller than 5MB.",
        "unexpectedError": "Failed to parse resume.",
        "translating": "Translating...",
        "translationFailed": "Content translation failed, but UI language changed.",
        "exportFailed": "PDF export failed. Trying browser print...",
        "knowledgeBase": "Knowledge Base",
        "tabEditor": "Editor",
        "tabPreview": "Preview",
    },
    "zh": {
        "appTitle": "AI 智能简历助手",
        "uploadBtn": "上传简历 (PDF/Word/图片)",
        "uploadTooltip": "支持 PDF, Word, 图片",
        "analyzing": "正在分析...",
        "exportBtn": "导出 PDF",
        "exporting": "正在生成 PDF...",
        "selectTemplate": "选择模板",
        "parseError": "无法从该文件中提取数据。请尝试其他文件或手动填写。",
        "fileSizeError": "文件过大，请上传小于 5MB 的文件。",
        "unexpectedError": "简历解析失败。",
        "translating": "正在翻译...",
        "translationFailed": "内容翻译失败，但界面语言已切换。",
        "exportFailed": "PDF 导出失败，正在尝试浏览器打印...",
        "knowledgeBase": "职场知识库",
        "tabEditor": "编辑简历",
        "tabPreview": "实时预览",
    },
}

TEMPLATE_NAMES = {
    "en": {
        "MODERN": "Modern",
        "CLASSIC": "Classic",
        "MINIMAL": "Minimal",
        "SIDEBAR": "Sidebar",
        "FRESH_GRAD": "Fresh Grad",
    },
    "zh": {
        "MODERN": "现代",
        "CLASSIC": "经典",
        "MINIMAL": "极简",
        "SIDEBAR": "侧边栏",
        "FRESH_GRAD": "应届生",
    },
}

SECTION_HEADERS = {
    "en": {
        "summary": "Professional Summary",
        "experience": "Work Experience",
        "projects": "Project Experience",
        "education": "Education",
        "skills": "Professional Skills",
        "links": "Links",
        "contact": "Contact",
        "basicInfo": "Basic Info",
        "selfEval": "Self Evaluation",
        "courses": "Courses: ",
    },
    "zh": {
        "summary": "自我评价",
        "experience": "工作经历",
        "projects": "项目经历",
        "education": "教育经历",
        "skills": "专业技能",
        "links": "作品链接",
        "contact": "联系方式",
        "basicInfo": "基本信息",
        "selfEval": "自我评价",
        "courses": "主修课程：",
    },
}

# Headers specific to the ribbon-sectioned "fresh graduate" layout
FRESH_GRAD_HEADERS = {
    "en": {
        "resume": "RESUME",
        "objective": "JOB OBJECTIVE:",
        "defaultObjective": "Fresh Graduate",
        "basicInfo": "Basic Information",
        "education": "Education Background",
        "campus": "Campus Experience",
        "internship": "Internship Experience",
        "skills": "Skills & Advantages",
        "selfEval": "Self Evaluation",
        "courses": "Main Courses:",
        "name": "Name:",
        "age": "Age:",
        "phone": "Tel:",
        "degree": "Degree:",
        "email": "Email:",
        "gender": "Gender:",
    },
    "zh": {
        "resume": "个人简历",
        "objective": "求职意向：",
        "defaultObjective": "应届毕业生",
        "basicInfo": "基本信息",
        "education": "教育背景",
        "campus": "校园经历",
        "internship": "实习经历",
        "skills": "技能&优势",
        "selfEval": "自我评价",
        "courses": "主修课程：",
        "name": "姓 名：",
        "age": "年 龄：",
        "phone": "电 话：",
        "degree": "学 历：",
        "email": "邮 箱：",
        "gender": "性 别：",
    },
}

# Short field labels used in the sidebar layout
FIELD_LABELS = {
    "en": {
        "age": "Age:",
        "gender": "Gender:",
        "location": "Loc:",
        "phone": "Tel:",
        "email": "Email:",
        "degree": "Degree:",
        "school": "School:",
        "defaultTitle": "Professional",
    },
    "zh": {
        "age": "年龄:",
        "gender": "性别:",
        "location": "居住地:",
        "phone": "电话:",
        "email": "邮箱:",
        "degree": "学历:",
        "school": "院校:",
        "defaultTitle": "Professional",
    },
}

FORM_LABELS = {
    "en": {
        "sections": {
            "personal": "Personal",
            "summary": "Summary",
            "experience": "Experience",
            "projects": "Projects",
            "education": "Education",
            "skills": "Skills",
        },
        "personal": {
            "title": "Personal Information",
            "avatar": "Profile Photo",
            "uploadAvatar": "Upload Photo",
            "removeAvatar": "Remove",
            "fullName": "Full Name",
            "age": "Age",
            "gender": "Gender",
            "email": "Email",
            "phone": "Phone",
            "location": "Location",
            "linkedin": "LinkedIn",
            "website": "Website/Portfolio",
        },
        "summary": {
            "title": "Professional Summary",
            "label": "Bio",
            "placeholder": "Briefly describe your professional background and key achievements...",
        },
        "experience": {
            "title": "Experience",
            "add": "+ Add Job",
            "jobTitle": "Job Title",
            "company": "Company",
            "startDate": "Start Date",
            "endDate": "End Date",
            "description": "Description (Bullet points)",
            "present": "Present",
        },
        "projects": {
            "title": "Projects",
            "add": "+ Add Project",
            "name": "Project Name",
            "role": "Your Role",
            "startDate": "Start Date",
            "endDate": "End Date",
            "description": "Description",
            "link": "Link (Optional)",
            "present": "Ongoing",
        },
        "education": {
            "title": "Education",
            "add": "+ Add School",
            "school": "School",
            "degree": "Degree",
            "major": "Major",
            "courses": "Main Courses",
            "year": "Year",
            "startDate": "Start Date",
            "endDate": "Graduation Date",
            "present": "Present",
        },
        "skills": {
            "title": "Skills",
            "add": "+ Add Skill",
            "name": "Skill Name",
            "level": "Proficiency (%)",
        },
    },
    "zh": {
        "sections": {
            "personal": "个人信息",
            "summary": "自我评价",
            "experience": "工作经历",
            "projects": "项目经历",
            "education": "教育经历",
            "skills": "技能专长",
        },
        "personal": {
            "title": "个人信息",
            "avatar": "头像照片",
            "uploadAvatar": "上传照片",
            "removeAvatar": "删除",
            "fullName": "姓名",
            "age": "年龄",
            "gender": "性别",
            "email": "电子邮箱",
            "phone": "联系电话",
            "location": "所在城市",
            "linkedin": "LinkedIn / 社交主页",
            "website": "个人网站 / 作品集",
        },
        "summary": {
            "title": "自我评价",
            "label": "简介",
            "placeholder": "简要描述您的职业背景、核心竞争力及主要成就...",
        },
        "experience": {
            "title": "工作经历",
            "add": "+ 添加工作",
            "jobTitle": "职位名称",
            "company": "公司名称",
            "startDate": "开始时间",
            "endDate": "结束时间",
            "description": "工作内容 (建议使用条列式)",
            "present": "至今",
        },
        "projects": {
            "title": "项目经历",
            "add": "+ 添加项目",
            "name": "项目名称",
            "role": "担任角色",
            "startDate": "开始时间",
            "endDate": "结束时间",
            "description": "项目描述",
            "link": "项目链接 (选填)",
            "present": "进行中",
        },
        "education": {
            "title": "教育经历",
            "add": "+ 添加学校",
            "school": "学校名称",
            "degree": "学历 (如: 本科)",
            "major": "专业 (如: 计算机)",
            "courses": "主修课程",
            "year": "毕业年份",
            "startDate": "入学时间",
            "endDate": "毕业时间",
            "present": "至今",
        },
        "skills": {
            "title": "技能专长",
            "add": "+ 添加技能",
            "name": "技能名称",
            "level": "熟练度 (%)",
        },
    },
}


def get_strings(table: dict, language: str) -> dict:
    """Return the ``language`` entry of a string table, falling back to English."""
    return table.get(language) or table["en"]
