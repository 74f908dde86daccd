"""Upload orchestration — parse, split, tag, summarise, then persist.

Usage::

    from doc_ingest.ingestion.embedder import get_pinecone_index
    from doc_ingest.ingestion.pipeline import IngestionPipeline

    pipeline = IngestionPipeline.from_settings(get_pinecone_index())
    result = pipeline.ingest(pdf_bytes, filename="report.pdf")
    print(result.document_id, result.page_count, result.summary)

Every step runs in sequence on the calling thread.  A failure anywhere
aborts the upload; segments Pinecone accepted before a later failure
are not rolled back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from doc_ingest.config import settings
from doc_ingest.ingestion.chunker import chunk_documents, tag_documents
from doc_ingest.ingestion.loader import load_pdf_bytes
from doc_ingest.ingestion.retry import retry
from doc_ingest.ingestion.summarizer import summarize

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.language_models import BaseChatModel
    from pinecone import Index

logger = logging.getLogger(__name__)

Loader = Callable[[bytes, "str | None", "str | None"], "list[Document]"]


class DocumentWriter(Protocol):
    """Anything that can persist embedded documents (see ``PineconeWriter``)."""

    def write(self, documents: list[Document]) -> list[str]: ...


class UploadResult(BaseModel):
    """Outcome of one successful upload."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    document_id: str = Field(alias="documentId")
    page_count: int = Field(alias="pageCount")


class IngestionPipeline:
    """Runs a single document through the ingestion steps.

    Parameters
    ----------
    llm:
        Chat model used for the summary.
    writer:
        Destination for the tagged chunks.
    loader:
        ``loader(data, filename, content_type) -> pages``.
    chunk_size / chunk_overlap:
        Splitter settings, in characters.
    summary_chunk_count:
        How many leading chunks feed the summary.
    upload_retries:
        Retries of the store write after the first attempt.
    retry_backoff:
        Exponential backoff multiplier between store-write attempts.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        writer: DocumentWriter,
        *,
        loader: Loader = load_pdf_bytes,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        summary_chunk_count: int = 3,
        upload_retries: int = 3,
        retry_backoff: float = 0.0,
    ) -> None:
        self.llm = llm
        self.writer = writer
        self.loader = loader
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.summary_chunk_count = summary_chunk_count
        self.upload_retries = upload_retries
        self.retry_backoff = retry_backoff

    @classmethod
    def from_settings(cls, index: Index) -> IngestionPipeline:
        """Wire the OpenAI and Pinecone collaborators from global settings."""
        from doc_ingest.ingestion.embedder import PineconeWriter, get_embedding_function
        from doc_ingest.ingestion.summarizer import get_llm

        return cls(
            llm=get_llm(),
            writer=PineconeWriter(index, get_embedding_function()),
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            summary_chunk_count=settings.summary_chunk_count,
            upload_retries=settings.upload_retries,
            retry_backoff=settings.upload_retry_backoff,
        )

    # -- public API -----------------------------------------------------------

    def ingest(
        self,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> UploadResult:
        """Ingest one uploaded document and return its summary and id."""
        document_id = str(uuid4())

        pages = self.loader(data, filename, content_type)
        chunks = chunk_documents(pages, chunk_size=self.chunk_size, chunk_overlap=self.chunk_overlap)
        tagged = tag_documents(chunks, document_id)
        logger.info(
            "Document %s: %d pages -> %d chunks", document_id, len(pages), len(chunks)
        )

        summary = summarize(self.llm, chunks, limit=self.summary_chunk_count)

        if tagged:
            self._store(tagged)
        else:
            logger.warning("Document %s produced no text chunks; nothing to index", document_id)

        return UploadResult(summary=summary, document_id=document_id, page_count=len(pages))

    # -- internals ------------------------------------------------------------

    def _store(self, documents: list[Document]) -> list[str]:
        def _on_failure(attempt: int, exc: BaseException) -> None:
            logger.warning("Retrying upload (%d/%d): %s", attempt, self.upload_retries, exc)

        return retry(
            lambda: self.writer.write(documents),
            max_attempts=self.upload_retries + 1,
            on_attempt_failed=_on_failure,
            backoff=self.retry_backoff,
        )
