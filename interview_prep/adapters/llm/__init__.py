"""LLM adapter layer - abstracts over LLM providers used for answer scoring."""

from interview_prep.adapters.llm.base import AbstractLLMClient
from interview_prep.adapters.llm.factory import create_llm_client
from interview_prep.adapters.llm.openai_client import OpenAIClient

__all__ = [
    "AbstractLLMClient",
    "OpenAIClient",
    "create_llm_client",
]
