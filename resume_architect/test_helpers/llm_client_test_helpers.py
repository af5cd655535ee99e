"""llm_client_test_helpers.py
Deterministic mock LLM responses used when an LLMClient runs in test mode.
"""

from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

MockFunctionName = Literal["extract_resume", "translate_resume"]
MockResponseType = Literal["success", "failed", "unexpected_json", "not_json"]

expected_test_responses = {
    "extract_resume": {
        "success": {
            "personalInfo": {
                "fullName": "Jane Smith",
                "email": "jane.smith@example.com",
                "phone": "+1 555 010 2000",
                "location": "Seattle, WA",
                "linkedin": "linkedin.com/in/janesmith",
                "website": None,
                "age": "30",
                "gender": "Female",
            },
            "summary": "Data engineer with 6 years of experience building pipelines.",
            "experience": [
                {
                    "title": "Data Engineer",
                    "company": "Cloud Analytics Co.",
                    "startDate": "2020-01",
                    "endDate": "Present",
                    "description": "• Built streaming ingestion on Kafka.\n• Cut warehouse cost by 30%.",
                }
            ],
            "projects": [
                {
                    "name": "Open Metrics",
                    "role": "Maintainer",
                    "startDate": "2021-05",
                    "endDate": "2022-02",
                    "description": "• Published a metrics exporter.",
                    "link": "github.com/janesmith/open-metrics",
                }
            ],
            "education": [
                {
                    "school": "State University",
                    "degree": "B.Sc.",
                    "major": "Statistics",
                    "startDate": "2012-09",
                    "endDate": "2016-06",
                    "courses": "Probability, Databases",
                }
            ],
            "skills": ["Python", "SQL", "Kafka"],
        },
        "failed": {},
        "unexpected_json": ["not", "an", "object"],
        "not_json": "I could not read this resume.",
    },
    "translate_resume": {
        "success": {
            "personalInfo": {
                "fullName": "亚历克斯·杜",
                "email": "alex.doe@example.com",
                "phone": "(555) 123-4567",
                "location": "旧金山",
                "linkedin": "linkedin.com/in/alexdoe",
                "website": "alexdoe.dev",
                "age": "28",
                "gender": "男",
            },
            "summary": "拥有五年以上全栈开发经验的软件工程师。",
            "experience": [
                {
                    "title": "高级软件工程师",
                    "company": "科技解决方案公司",
                    "startDate": "2021-03",
                    "endDate": "至今",
                    "description": "• 带领五人团队重构支付微服务。",
                }
            ],
            "projects": [],
            "education": [],
            "skills": ["React", "TypeScript"],
        },
        "failed": {},
        "unexpected_json": ["not", "an", "object"],
        "not_json": "Translation unavailable.",
    },
}


def create_mock_llm_response(
    function_name: MockFunctionName,
    provider: Literal["anthropic"],
    response_type: MockResponseType = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict/list responses to JSON string; leave strings as-is
    content = json.dumps(content_value, ensure_ascii=False) if isinstance(content_value, (dict, list)) else content_value

    # --- token counts ---
    input_tokens = random.randint(50, 150)
    output_tokens = random.randint(20, 100)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
