"""Document summarisation with a hosted chat model.

The model answers with either a plain string or a list of content
parts (``str`` or ``{"type": "text", "text": ...}`` dicts).  Only the
first part is used, matching what single-turn chat models return.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from doc_ingest.config import settings
from doc_ingest.errors import ParseError, RemoteServiceError

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.language_models import BaseChatModel
    from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful AI assistant that summarizes documents."
USER_PROMPT_TEMPLATE = "Summarize the following content:\n{content}"


def get_llm(temperature: float | None = None) -> ChatOpenAI:
    """Return the configured chat model.

    When ``settings.llm_base_url`` is set the client talks to that
    OpenAI-compatible endpoint instead of the OpenAI cloud API.
    """
    kwargs: dict = {
        "model": settings.llm_model_name,
        "api_key": settings.openai_api_key,
    }
    if temperature is not None:
        kwargs["temperature"] = temperature
    if settings.llm_base_url:
        logger.info("Using chat endpoint: %s", settings.llm_base_url)
        kwargs["base_url"] = settings.llm_base_url

    return ChatOpenAI(**kwargs)


def build_summary_messages(chunks: list[Document], limit: int = 3) -> list[BaseMessage]:
    """Build the prompt from the text of the first *limit* chunks."""
    content = "\n\n".join(doc.page_content for doc in chunks[:limit])
    return [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(content=USER_PROMPT_TEMPLATE.format(content=content)),
    ]


def extract_summary_text(content: str | list[Any]) -> str:
    """Resolve a chat response's ``content`` to plain text.

    Raises
    ------
    ParseError
        When a structured response has no parts, or its first part
        carries no text.
    """
    if isinstance(content, str):
        return content

    if not content:
        raise ParseError("Summary response contained no content parts")

    first = content[0]
    if isinstance(first, str):
        return first
    if isinstance(first, dict) and isinstance(first.get("text"), str):
        return first["text"]
    raise ParseError(f"Summary response part has no text: {first!r}")


def summarize(llm: BaseChatModel, chunks: list[Document], limit: int = 3) -> str:
    """Summarise the opening *limit* chunks of a document."""
    messages = build_summary_messages(chunks, limit=limit)
    try:
        response = llm.invoke(messages)
    except Exception as exc:
        raise RemoteServiceError(str(exc)) from exc
    return extract_summary_text(response.content)
