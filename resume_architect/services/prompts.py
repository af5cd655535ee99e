"""prompts.py
Prompt text sent to the LLM for resume extraction and translation.

The wording is not a contract. Only the JSON shape described in
`RESUME_JSON_SHAPE` is relied upon when reading the response back.
"""
import json
from typing import Any, Dict

from resume_architect.i18n import LANGUAGE_NAMES
from resume_architect.models import Language

# Shape of the JSON object the model must return (skills as bare strings)
RESUME_JSON_SHAPE = """{
  "personalInfo": {
    "fullName": string, "age": string, "gender": string, "email": string,
    "phone": string, "location": string, "linkedin": string, "website": string
  },
  "summary": string,
  "experience": [
    {"title": string, "company": string, "startDate": "YYYY-MM or Present",
     "endDate": "YYYY-MM or Present", "description": string}
  ],
  "projects": [
    {"name": string, "role": string, "startDate": "YYYY-MM", "endDate": "YYYY-MM",
     "description": string, "link": string}
  ],
  "education": [
    {"degree": string, "major": string, "school": string, "year": string,
     "startDate": "YYYY-MM", "endDate": "YYYY-MM", "courses": string}
  ],
  "skills": [string]
}"""

EXTRACTION_SYSTEM_PROMPT = (
    "You convert resumes into structured JSON. "
    "Respond with a single JSON object and nothing else, using exactly this shape:\n"
    f"{RESUME_JSON_SHAPE}\n"
    "The keys personalInfo, experience, education and skills are required."
)

EXTRACTION_PROMPTS: Dict[str, str] = {
    "en": (
        "Extract the resume information from the attached document into the specified JSON structure. "
        "Notes: 1. Extract 'degree' and 'major' separately for education. "
        "2. Standardize all dates to 'YYYY-MM' format where possible, use 'Present' for current roles. "
        "3. Extract start and end dates for education. "
        "4. Extract age and gender if available. "
        "If a field is missing, leave it as an empty string. "
        "Summarize experience and project descriptions into concise bullet points."
    ),
    "zh": (
        "请从附件中提取简历信息，并按照指定的 JSON 结构输出。请注意："
        "1. 将教育经历中的'学历'和'专业'分开提取。"
        "2. 所有时间字段请尽量标准化为 'YYYY-MM' 格式（如 2023-01），如果是'至今'请填 'Present'。"
        "3. 尽量提取教育经历的开始和结束时间。"
        "4. 如果简历中有年龄和性别信息，请提取。"
        "如果某个字段缺失，请保留为空字符串。请将工作经历和项目经历的描述总结为简洁的要点。"
    ),
}

DOCUMENT_TEXT_PREFIX = "Resume Text Content:\n"


def get_extraction_prompt(language: Language) -> str:
    """Return the extraction instruction for `language` (English if unknown)."""
    return EXTRACTION_PROMPTS.get(language, EXTRACTION_PROMPTS["en"])


def build_text_extraction_prompt(document_text: str, language: Language) -> str:
    """User prompt for word-processor uploads: the extracted text, then the instruction."""
    return f"{DOCUMENT_TEXT_PREFIX}{document_text}\n\n{get_extraction_prompt(language)}"


def build_translation_prompt(payload: Dict[str, Any], target_language: Language) -> str:
    """
    Build the translation instruction for an id-free resume payload.

    Args:
        payload: Output of `normalize.build_translation_payload`.
        target_language: "en" or "zh".
    """
    target_name = LANGUAGE_NAMES.get(target_language, LANGUAGE_NAMES["en"])
    return (
        f"Translate the following resume JSON data into {target_name}.\n"
        "Rules:\n"
        "1. Maintain the exact JSON structure.\n"
        "2. Translate 'summary', 'description', 'title', 'role', 'degree', 'major', 'school', "
        "'location', 'gender' and skill names.\n"
        "3. Do NOT translate proper nouns (like names of people or specific tech stack names like "
        "React, Python) if they are usually kept in original language, but translate company names "
        "if appropriate or provide transliteration.\n"
        "4. Convert 'Present' to '至今' if translating to Chinese, and '至今' to 'Present' if "
        "translating to English.\n"
        "5. Return only the translated JSON object.\n\n"
        "JSON Data to translate:\n"
        f"{json.dumps(payload, ensure_ascii=False)}"
    )
