"""llm_resume_adapter.py
Holds abstract LLMResumeAdapter class shared by the extraction and translation adapters.
"""
from abc import ABC
from typing import Any, Dict, List, Optional

from resume_architect.exceptions import ResumeDataError
from resume_architect.ids import IdGenerator, uuid_id_generator
from resume_architect.llm.llm_client import LLMClient
from resume_architect.llm.llm_helpers import initialize_llm_if_needed


class LLMResumeAdapter(ABC):
    """
    Base class for adapters that send resume content to an LLM and map the
    JSON response back onto ResumeData.

    Args:
        llm_client (LLMClient | None): Pre-initialized LLMClient to use for queries.
            Built lazily on first query when not provided.
        id_generator (IdGenerator): Source of ids for list items.
        force_mock_llm_response (bool | False): Don't run a live LLM query and return
            `llm_dummy_response` instead.
        llm_dummy_response (Any | None): Preset response returned when
            `force_mock_llm_response` is True (for testing).
    """
    # Name passed to LLMClient (selects the mock response in LLMClient test mode)
    FUNCTION_NAME: str = ""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        id_generator: IdGenerator = uuid_id_generator,
        force_mock_llm_response: Optional[bool] = False,
        llm_dummy_response: Optional[Any] = None,
    ):
        self.llm_client = llm_client
        self.id_generator = id_generator
        self.force_mock_llm_response = force_mock_llm_response
        self.llm_dummy_response = llm_dummy_response

    def _initiate_llm(self) -> None:
        """
        Initialize the LLM client if one isn't already defined.

        Raises:
            LLMConfigError: If the API key is missing.
            LLMInitializationError: If the LangChain client cannot be built.
        """
        # If we're in "mock" mode then don't initiate the client.
        if self.force_mock_llm_response:
            self.llm_client = None
            return

        self.llm_client = initialize_llm_if_needed(
            llm_client=self.llm_client,
            function_name=self.FUNCTION_NAME,
        )

    def _query_llm(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        attachments: Optional[List[Dict[str, Any]]] = None,
    ) -> Any:
        """
        Query the LLM client and return its (JSON-parsed where possible) response.

        If `force_mock_llm_response` is True, returns the preset dummy response
        instead of making a live query.

        Raises:
            ResumeDataError: If mock mode is on without a dummy response.
            LLMConfigError / LLMError: From client setup or the query itself.
        """
        if self.force_mock_llm_response:
            if self.llm_dummy_response is None:
                raise ResumeDataError(
                    "if force_mock_llm_response is True a `llm_dummy_response` is required "
                    f"to query the LLM from {self.__class__.__name__}"
                )
            return self.llm_dummy_response

        if self.llm_client is None or getattr(self.llm_client, "client", None) is None:
            self._initiate_llm()

        return self.llm_client.query(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            attachments=attachments,
            expect_json=True,
        )
