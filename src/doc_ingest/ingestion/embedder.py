"""Embedding and vector-store persistence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_openai import OpenAIEmbeddings
from langchain_pinecone import PineconeVectorStore
from pinecone import Pinecone

from doc_ingest.config import settings

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings
    from pinecone import Index

logger = logging.getLogger(__name__)


def get_embedding_function() -> OpenAIEmbeddings:
    """Return the configured OpenAI embedding function.

    ``chunk_size`` is the number of texts sent per request; it is kept
    small to stay under rate limits.
    """
    return OpenAIEmbeddings(
        model=settings.embedding_model,
        api_key=settings.openai_api_key,
        chunk_size=settings.embedding_batch_size,
    )


def get_pinecone_index(
    api_key: str | None = None,
    index_name: str | None = None,
) -> Index:
    """Create the Pinecone client and return a handle on the target index.

    Call once at startup and pass the handle around; the handle holds no
    per-request state.
    """
    index_name = index_name or settings.pinecone_index_name
    client = Pinecone(api_key=api_key or settings.pinecone_api_key)
    logger.info("Connecting to Pinecone index %r", index_name)
    return client.Index(index_name)


class PineconeWriter:
    """Embeds documents and upserts (vector, text, metadata) into Pinecone.

    Parameters
    ----------
    index:
        Pinecone index handle from :func:`get_pinecone_index`.
    embedding:
        Embedding function applied to each document's text.
    """

    def __init__(self, index: Index, embedding: Embeddings) -> None:
        self._store = PineconeVectorStore(index=index, embedding=embedding)

    def write(self, documents: list[Document]) -> list[str]:
        """Embed and store *documents*; return the ids Pinecone assigned."""
        ids = self._store.add_documents(documents)
        logger.info("Upserted %d vectors", len(ids))
        return ids
