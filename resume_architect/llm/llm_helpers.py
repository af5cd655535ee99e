"""llm_helpers.py
Functions to help with initiating a LLMClient class
"""

from typing import Optional

from resume_architect.llm.llm_client import LLMClient


def initialize_llm_if_needed(
    llm_client: Optional[LLMClient] = None,
    function_name: Optional[str] = None,
) -> LLMClient:
    """
    Return a ready-to-query LLMClient, reusing `llm_client` when one is given.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of `LLMClient`,
           initializes its LangChain client if that has not happened yet, and returns it.
        2. Otherwise builds a new `LLMClient` tagged with `function_name` and initializes it.

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.
        function_name (Optional[str]): Name of the calling feature (e.g. "extract_resume").

    Returns:
        LLMClient: An initialized client.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
        LLMConfigError: If a new client is needed and the API key is missing.
        LLMInitializationError: If the LangChain client cannot be built.
    """
    # Validate or update an existing LLMClient
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        if getattr(llm_client, "client", None) is None:
            llm_client.initialize_client()
        return llm_client

    # Initialize new LLM client
    llm_client = LLMClient(function_name=function_name)
    llm_client.initialize_client()

    return llm_client
