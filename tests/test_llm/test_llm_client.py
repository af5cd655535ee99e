"""test_llm_client.py
Test LLMClient class.
"""
import json
import pytest
from unittest.mock import MagicMock, patch

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.llm.llm_client import (
    LLMClient,
    LLMConfigError,
    LLMInitializationError,
    LLMQueryError,
    LLMEmptyResponse,
    build_attachment_block,
)


# -----------------------------
# Initialization tests
# -----------------------------
def test_invalid_provider_raises(FAKE_API_KEY):
    """Ensure initializing LLMClient with unsupported provider raises LLMConfigError."""
    with pytest.raises(LLMConfigError):
        LLMClient(provider="unsupported")


def test_model_resolution_defaults(FAKE_API_KEY):
    """Check that model defaults to BUILDER_DEFAULTS if not provided."""
    client = LLMClient(provider="anthropic", model=None)
    assert client.model == BUILDER_DEFAULTS.ANTHROPIC_MODEL_ID
    assert client.api_key == "test-key"


def test_missing_api_key_raises(monkeypatch):
    """Check that missing API key raises LLMConfigError."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(LLMConfigError):
        LLMClient(provider="anthropic")


def test_placeholder_api_key_raises(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "<REPLACE_ME>")
    with pytest.raises(LLMConfigError) as exc_info:
        LLMClient(provider="anthropic")
    assert "[CONFIG ERROR]" in str(exc_info.value)


# -----------------------------
# Client initialization
# -----------------------------
@patch("langchain_anthropic.ChatAnthropic")
def test_initialize_client_anthropic(mock_chatanthropic, FAKE_API_KEY):
    """Verify Anthropic client initializes correctly with API key and model."""
    client = LLMClient(provider="anthropic", model="test-model")
    client.initialize_client()
    mock_chatanthropic.assert_called_once_with(
        model="test-model",
        anthropic_api_key="test-key",
        temperature=BUILDER_DEFAULTS.LLM_TEMPERATURE,
        max_tokens=BUILDER_DEFAULTS.LLM_MAX_TOKENS,
    )
    assert client.client is mock_chatanthropic.return_value


@patch("langchain_anthropic.ChatAnthropic", side_effect=RuntimeError("boom"))
def test_initialize_client_failure_wrapped(mock_chatanthropic, FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    with pytest.raises(LLMInitializationError) as exc_info:
        client.initialize_client()
    assert "boom" in str(exc_info.value)


# -----------------------------
# Attachments
# -----------------------------
def test_pdf_attachment_is_document_block():
    block = build_attachment_block(b"%PDF-1.7", "application/pdf")
    assert block["type"] == "document"
    assert block["source"] == {"type": "base64", "media_type": "application/pdf", "data": "JVBERi0xLjc="}


def test_image_attachment_is_image_block():
    block = build_attachment_block(b"\x89PNG", "image/png")
    assert block["type"] == "image"
    assert block["source"]["media_type"] == "image/png"


# -----------------------------
# Query tests
# -----------------------------
def test_query_without_client_raises(FAKE_API_KEY):
    """Query without initializing client should raise LLMInitializationError."""
    client = LLMClient(provider="anthropic", model="test-model")
    with pytest.raises(LLMInitializationError):
        client.query(system_prompt="Hi", user_prompt="Hello")


def test_query_sends_attachments_before_prompt(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content='```json\n{"summary": "ok"}\n```')
    attachment = build_attachment_block(b"%PDF-1.7", "application/pdf")

    result = client.query(
        system_prompt="sys",
        user_prompt="extract",
        attachments=[attachment],
        expect_json=True,
    )

    assert result == {"summary": "ok"}
    messages = client.client.invoke.call_args.args[0]
    assert isinstance(messages[0], SystemMessage)
    assert isinstance(messages[1], HumanMessage)
    assert messages[1].content == [attachment, {"type": "text", "text": "extract"}]


def test_query_without_system_prompt_sends_one_message(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content="plain text")

    assert client.query(system_prompt=None, user_prompt="hello") == "plain text"
    messages = client.client.invoke.call_args.args[0]
    assert len(messages) == 1
    assert messages[0].content == "hello"


def test_query_joins_text_blocks(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(
        content=[{"type": "text", "text": '{"a": '}, {"type": "text", "text": "1}"}]
    )
    assert client.query(system_prompt=None, user_prompt="x", expect_json=True) == {"a": 1}


def test_query_empty_response_raises(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content="")
    with pytest.raises(LLMEmptyResponse):
        client.query(system_prompt=None, user_prompt="x")


def test_query_transport_error_wrapped(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.side_effect = ConnectionError("network down")
    with pytest.raises(LLMQueryError) as exc_info:
        client.query(system_prompt=None, user_prompt="x")
    assert "network down" in str(exc_info.value)


def test_query_invalid_json_warns_and_returns_text(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content="no json here")
    with pytest.warns(UserWarning):
        result = client.query(system_prompt=None, user_prompt="x", expect_json=True)
    assert result == "no json here"


def test_query_test_mode_returns_mock(FAKE_API_KEY):
    """Verify test_mode returns deterministic mock response using create_mock_llm_response."""
    client = LLMClient(
        provider="anthropic",
        model="test-model",
        test_mode=True,
        function_name="extract_resume",
        test_response_type="success"
    )
    client.client = MagicMock()
    result = client.query(system_prompt="sys", user_prompt="user", expect_json=True)
    assert isinstance(result, dict)
    assert result["personalInfo"]["fullName"] == "Jane Smith"
    client.client.invoke.assert_not_called()


def test_query_test_mode_without_function_name_raises(FAKE_API_KEY):
    client = LLMClient(provider="anthropic", model="test-model", test_mode=True)
    client.client = MagicMock()
    with pytest.raises(LLMQueryError):
        client.query(system_prompt=None, user_prompt="user")


# -----------------------------
# _clean_llm_json_response tests
# -----------------------------
@pytest.mark.parametrize("raw,expected", [
    ('{"a":1}', {"a": 1}),
    ('```json\n{"b":2}```', {"b": 2}),
    ('Some text {"c":3} more text', {"c": 3}),
    ('[1,2,3]', [1, 2, 3])
])
def test_clean_llm_json_response_valid(raw, expected, FAKE_API_KEY):
    """Verify _clean_llm_json_response parses valid JSON and fenced JSON correctly."""
    client = LLMClient(provider="anthropic", model="test-model")
    assert client._clean_llm_json_response(raw) == expected


def test_clean_llm_json_response_invalid(FAKE_API_KEY):
    """Ensure invalid JSON raises JSONDecodeError."""
    client = LLMClient(provider="anthropic", model="test-model")
    with pytest.raises(json.JSONDecodeError):
        client._clean_llm_json_response("invalid json string")


# -----------------------------
# Connection tests
# -----------------------------
def test_test_connection_success(FAKE_API_KEY):
    """Verify _test_connection_generic returns True for successful mock client ping."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.return_value = MagicMock(content="pong")
    client.client = mock_client
    assert client.test_connection() is True


def test_test_connection_failure_quota(FAKE_API_KEY):
    """Verify LLMInitializationError raised if client ping fails with quota error."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.side_effect = Exception("insufficient_quota")
    client.client = mock_client
    with pytest.raises(LLMInitializationError) as e:
        client._test_connection_generic("Anthropic")
    assert "Out of tokens" in str(e.value)


def test_test_connection_failure_rate_limit(FAKE_API_KEY):
    """Verify LLMInitializationError raised if client ping fails due to rate limit."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.side_effect = Exception("Rate limit reached")
    client.client = mock_client
    with pytest.raises(LLMInitializationError) as e:
        client._test_connection_generic("Anthropic")
    assert "Rate limit" in str(e.value)
