"""
llm_client.py

LangChain chat client used by the extraction and translation adapters.

Only Anthropic is wired up. A provider is described by a `ProviderSettings`
entry (API key variable, default model, LangChain factory), so adding one means
adding an entry to `PROVIDERS`.
"""
import base64
import json
import os
import re
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional

from dotenv import load_dotenv
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.exceptions import (
    LLMConfigError,
    LLMEmptyResponse,
    LLMInitializationError,
    LLMQueryError,
)
from resume_architect.test_helpers.llm_client_test_helpers import create_mock_llm_response

load_dotenv()

API_KEY_PLACEHOLDER = "<REPLACE_ME>"

FENCE_OPEN_REGEX = re.compile(r"^```[a-zA-Z]*\n?")
FENCE_CLOSE_REGEX = re.compile(r"\n?```$")
JSON_BODY_REGEX = re.compile(r"(\{.*\}|\[.*\])", re.DOTALL)


def _anthropic_chat_model(model: str, api_key: str):
    from langchain_anthropic import ChatAnthropic
    return ChatAnthropic(
        model=model,
        anthropic_api_key=api_key,
        temperature=BUILDER_DEFAULTS.LLM_TEMPERATURE,
        max_tokens=BUILDER_DEFAULTS.LLM_MAX_TOKENS,
    )


@dataclass(frozen=True)
class ProviderSettings:
    display_name: str
    api_key_env: str
    default_model: str
    build_chat_model: Callable[[str, str], Any]


PROVIDERS: Dict[str, ProviderSettings] = {
    "anthropic": ProviderSettings(
        display_name="Anthropic",
        api_key_env="ANTHROPIC_API_KEY",
        default_model=BUILDER_DEFAULTS.ANTHROPIC_MODEL_ID,
        build_chat_model=_anthropic_chat_model,
    ),
}

SUPPORTED_PROVIDERS = list(PROVIDERS)


def build_attachment_block(data: bytes, mime_type: str) -> Dict[str, Any]:
    """
    Build an Anthropic content block carrying a base64 encoded file.

    PDFs become ``document`` blocks and everything else ``image`` blocks.

    Example:
        >>> build_attachment_block(b"%PDF-1.7...", "application/pdf")["type"]
        'document'
    """
    return {
        "type": "document" if mime_type == "application/pdf" else "image",
        "source": {
            "type": "base64",
            "media_type": mime_type,
            "data": base64.b64encode(data).decode("ascii"),
        },
    }


class LLMClient:
    """
    Chat model client for one feature of the builder (`function_name`).

    Configuration (provider, model, API key from the environment or `.env`) is
    resolved and validated on construction. The LangChain model itself is only
    built by `initialize_client()`, so constructing a client never makes a
    network call.

    In test mode `query` returns the canned response registered for
    `function_name` / `test_response_type` in `llm_client_test_helpers`
    instead of calling the model.

    Args:
        provider (str): Key of `PROVIDERS`. Defaults to BUILDER_DEFAULTS.LLM_PROVIDER.
        model (str | None): Model id; the provider's default when omitted.
        function_name (str | None): Calling feature, e.g. "extract_resume".
        fallback_message (str | None): Returned if the response text ends up empty
            after JSON parsing.
        test_mode (bool): Answer with canned responses.
        test_response_type: Which canned response to use in test mode.

    Raises:
        LLMConfigError: On an unknown provider or a missing API key.

    Example:
        >>> client = LLMClient(function_name="extract_resume")
        >>> client.initialize_client()
        >>> client.query(
        ...     system_prompt=EXTRACTION_SYSTEM_PROMPT,
        ...     user_prompt=get_extraction_prompt("en"),
        ...     attachments=[build_attachment_block(pdf_bytes, "application/pdf")],
        ...     expect_json=True,
        ... )
        {'personalInfo': {...}, 'summary': '...', ...}
    """

    def __init__(
        self,
        provider: Optional[str] = BUILDER_DEFAULTS.LLM_PROVIDER,
        model: Optional[str] = None,
        function_name: Optional[str] = None,
        fallback_message: Optional[str] = None,
        test_mode: Optional[bool] = False,
        test_response_type: Literal["success", "failed", "unexpected_json", "not_json"] = "success",
    ):
        self.function_name = function_name
        self.fallback_message = fallback_message
        self.test_mode = test_mode
        self.test_response_type = test_response_type

        if provider not in PROVIDERS:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                extra_info=f"Choices are: {SUPPORTED_PROVIDERS}"
            )
        self.provider = provider
        self.settings = PROVIDERS[provider]
        self.model = model or self.settings.default_model
        self.api_key = self._read_api_key()

        # Built by initialize_client()
        self.client = None

    def _read_api_key(self) -> str:
        api_key = os.getenv(self.settings.api_key_env)
        if not api_key or api_key == API_KEY_PLACEHOLDER:
            raise LLMConfigError(
                variable_name=self.settings.api_key_env,
                message=(
                    f"You must set a `{self.provider}` API key in your environment variables "
                    "to run LLM queries to their services."
                )
            )
        return api_key

    def initialize_client(self) -> None:
        """
        Build the LangChain chat model. Free: no request is sent.

        Raises:
            LLMInitializationError: If the model cannot be constructed.
        """
        try:
            self.client = self.settings.build_chat_model(self.model, self.api_key)
        except Exception as e:
            raise LLMInitializationError(
                provider=self.provider,
                model=self.model,
                original_exception=e
            )

    # --------------------------------------------------------------
    # QUERYING
    # --------------------------------------------------------------
    def query(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        attachments: Optional[List[Dict[str, Any]]] = None,
        temperature: float = BUILDER_DEFAULTS.LLM_TEMPERATURE,
        expect_json: bool = False,
    ) -> str | dict | list:
        """
        Send one request and return the answer.

        Args:
            system_prompt: Optional system message.
            user_prompt: The instruction. Sent after any `attachments` in the same message.
            attachments: Content blocks from `build_attachment_block`.
            temperature: Sampling temperature.
            expect_json: Parse the answer as JSON. If that fails a UserWarning is
                emitted and the raw text is returned.

        Raises:
            LLMInitializationError: If `initialize_client()` has not been run.
            LLMEmptyResponse: If the model answered with no text.
            LLMQueryError: On any other failure, wrapping the original exception.
        """
        if not self.client:
            raise LLMInitializationError(provider=self.provider, model=self.model)

        messages = self._build_messages(system_prompt, user_prompt, attachments)

        try:
            response = self._respond(messages, temperature)
            text = self._response_text(response)
            if not text:
                raise LLMEmptyResponse(provider=self.provider, model=self.model)

            result = self._parse_json_or_warn(text) if expect_json else text
            if result is None or result == "":
                return self.fallback_message or "No query result"
            return result

        except LLMEmptyResponse:
            raise
        except Exception as e:
            raise LLMQueryError(provider=self.provider, model=self.model, original_exception=e)

    @staticmethod
    def _build_messages(
        system_prompt: Optional[str],
        user_prompt: str,
        attachments: Optional[List[Dict[str, Any]]],
    ) -> List[BaseMessage]:
        content = [*attachments, {"type": "text", "text": user_prompt}] if attachments else user_prompt
        messages: List[BaseMessage] = [SystemMessage(content=system_prompt)] if system_prompt else []
        messages.append(HumanMessage(content=content))
        return messages

    def _respond(self, messages: List[BaseMessage], temperature: float) -> AIMessage:
        if not self.test_mode:
            return self.client.invoke(messages, temperature=temperature)

        if not (self.function_name and self.test_response_type):
            raise LLMQueryError(
                provider=self.provider,
                model=self.model,
                additional_message=(
                    "Test mode needs a `function_name` and `test_response_type` to pick a mock response "
                    f"(function_name={self.function_name!r}, test_response_type={self.test_response_type!r})"
                ),
            )
        return create_mock_llm_response(
            function_name=self.function_name,
            response_type=self.test_response_type,
            provider=self.provider
        )

    @staticmethod
    def _response_text(response: Optional[AIMessage]) -> str:
        """Stripped text of a response. Content given as a list of blocks has its text blocks joined."""
        content = getattr(response, "content", None)
        if not content:
            return ""
        if isinstance(content, list):
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return content.strip()

    def _parse_json_or_warn(self, text: str) -> Any:
        try:
            return self._clean_llm_json_response(text)
        except json.JSONDecodeError as e:
            warnings.warn(
                f"LLM did not return valid JSON when it was expected to. "
                f"Provider: `{self.provider}` Model: `{self.model}` Function: `{self.function_name}`\n"
                f"Exception: `{e}`",
                category=UserWarning,
            )
            return text

    def _clean_llm_json_response(self, response_text: str) -> Any:
        """
        Parse JSON out of a model answer.

        Markdown code fences are stripped first. If the remaining text still isn't
        valid JSON, the outermost `{...}` or `[...]` span is parsed instead.

        Raises:
            json.JSONDecodeError: If no JSON can be recovered.
        """
        text = FENCE_CLOSE_REGEX.sub("", FENCE_OPEN_REGEX.sub("", response_text.strip()))
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            match = JSON_BODY_REGEX.search(text)
            if not match:
                raise
            return json.loads(match.group(1))

    # --------------------------------------------------------------
    # CONNECTION CHECK
    # --------------------------------------------------------------
    def test_connection(self) -> bool:
        """
        Ping the model to confirm the key, quota and rate limits allow requests.
        Initializes the client first if needed.

        Raises:
            LLMInitializationError: If the ping fails (with a hint for quota and rate limit errors).
        """
        if not self.client:
            self.initialize_client()
        return self._test_connection_generic(self.settings.display_name)

    def _test_connection_generic(self, provider_name: str) -> bool:
        try:
            response = self.client.invoke("ping")
        except Exception as e:
            error_text = str(e).lower()
            hints = []
            if "insufficient_quota" in error_text:
                hints.append(f"Out of tokens for `{provider_name}`")
            if "rate limit" in error_text:
                hints.append(f"Rate limit reached for `{provider_name}`")
            raise LLMInitializationError(
                provider=provider_name,
                model=self.model,
                original_exception=e,
                additional_message="; ".join(hints) or None,
            )
        return bool(response is not None and hasattr(response, "content"))
