"""knowledge_base.py
Static career-advice articles shown next to the editor.

Article bodies use "\\n" line breaks and **bold** markers, rendered by the UI.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from resume_architect.models import Language


@dataclass(frozen=True)
class Article:
    title: str
    content: str


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    articles: List[Article] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "articles": [{"title": a.title, "content": a.content} for a in self.articles],
        }


KNOWLEDGE_BASE: Dict[str, List[Category]] = {
    "en": [
        Category(
            id="resume",
            name="Resume Tips",
            articles=[
                Article(
                    title="The STAR Method",
                    content=(
                        "Use the STAR method to describe your experiences:\n\n"
                        "• **Situation**: Set the scene.\n"
                        "• **Task**: Describe your responsibility.\n"
                        "• **Action**: Explain what steps you took.\n"
                        "• **Result**: Share outcomes (use numbers!)."
                    ),
                ),
                Article(
                    title="Action Verbs",
                    content=(
                        'Start bullet points with strong action verbs like "Led", "Developed", '
                        '"Increased", "Optimized" rather than passive phrases like "Responsible for".'
                    ),
                ),
                Article(
                    title="ATS Optimization",
                    content=(
                        "Keep formatting simple. Use standard headings. Include keywords from "
                        "the job description to pass Applicant Tracking Systems."
                    ),
                ),
            ],
        ),
        Category(
            id="interview",
            name="Interview Prep",
            articles=[
                Article(
                    title="Tell Me About Yourself",
                    content=(
                        "Keep it professional. Briefly cover your past, focus on your current "
                        "achievements, and explain why you are interested in this specific role "
                        "and future goals."
                    ),
                ),
                Article(
                    title="Greatest Weakness",
                    content=(
                        "Choose a real weakness but show how you are working to improve it. "
                        'Example: "I sometimes struggle with public speaking, so I joined a '
                        'Toastmasters club to practice."'
                    ),
                ),
            ],
        ),
    ],
    "zh": [
        Category(
            id="resume",
            name="简历撰写技巧",
            articles=[
                Article(
                    title="STAR 法则",
                    content=(
                        "使用 STAR 法则描述你的经历，让成就更具说服力：\n\n"
                        "• **情境 (Situation)**: 任务背景是什么？\n"
                        "• **任务 (Task)**: 你面临的挑战或目标？\n"
                        "• **行动 (Action)**: 你具体做了什么？\n"
                        "• **结果 (Result)**: 取得了什么可量化的成果？"
                    ),
                ),
                Article(
                    title="拒绝“流水账”",
                    content=(
                        "不要只列出工作职责（Responsible for...）。要强调你的贡献。"
                        "例如，将“负责销售”改为“通过新客户开发策略，使季度销售额增长了 20%”。"
                    ),
                ),
                Article(
                    title="排版与关键词",
                    content=(
                        "HR 浏览简历通常只需 6-10 秒。确保重点突出，使用加粗字体强调技能和数据。"
                        "根据职位描述（JD）调整简历中的关键词。"
                    ),
                ),
            ],
        ),
        Category(
            id="interview",
            name="面试通关秘籍",
            articles=[
                Article(
                    title="自我介绍范式",
                    content=(
                        "公式：我是谁 + 我的核心亮点/成就 + 我为什么匹配这个岗位。\n"
                        "控制在 2-3 分钟内，不要背诵简历，要讲故事。"
                    ),
                ),
                Article(
                    title="如何回答“你的缺点”",
                    content=(
                        "不要说“过于追求完美”这种假缺点。说一个真实的、非核心能力的缺点，"
                        "并重点描述你正在如何改进它。例如：“我在公开演讲方面比较紧张，"
                        "所以我正在主动参与团队分享会来锻炼自己。”"
                    ),
                ),
                Article(
                    title="反向提问环节",
                    content=(
                        "面试结束时不要说“没问题了”。可以问：“团队目前的重点目标是什么？”、"
                        "“您对这个职位的理想人选有什么期待？”，这能体现你的积极性。"
                    ),
                ),
            ],
        ),
        Category(
            id="career",
            name="职场生存法则",
            articles=[
                Article(
                    title="向上管理",
                    content=(
                        "定期主动汇报进度，不要等老板问。遇到问题带上方案去请示，"
                        "而不仅仅是带去问题。了解老板的优先事项。"
                    ),
                ),
                Article(
                    title="高效沟通",
                    content=(
                        "结论先行。在邮件或汇报中，先说结果或核心观点，"
                        "再展开论述细节（金字塔原理）。"
                    ),
                ),
            ],
        ),
    ],
}

# Category expanded when the panel first opens
DEFAULT_OPEN_CATEGORY = "resume"


def get_knowledge_base(language: Language) -> List[Category]:
    """Categories for `language`, falling back to English."""
    return KNOWLEDGE_BASE.get(language) or KNOWLEDGE_BASE["en"]
