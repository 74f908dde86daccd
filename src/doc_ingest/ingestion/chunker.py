"""Text chunking and per-document metadata tagging."""

from __future__ import annotations

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

DOCUMENT_ID_KEY = "documentId"


def chunk_documents(
    documents: list[Document],
    chunk_size: int = 1000,
    chunk_overlap: int = 200,
) -> list[Document]:
    """Split *documents* into smaller chunks for embedding.

    Parameters
    ----------
    documents:
        Page documents produced by a loader.
    chunk_size:
        Maximum number of characters per chunk.
    chunk_overlap:
        Number of overlapping characters between consecutive chunks.

    Returns
    -------
    list[Document]
        Chunked documents, each carrying its page's metadata.
    """
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
    )
    return splitter.split_documents(documents)


def tag_documents(documents: list[Document], document_id: str) -> list[Document]:
    """Return copies of *documents* with ``documentId`` added to their metadata."""
    return [
        Document(
            page_content=doc.page_content,
            metadata={**doc.metadata, DOCUMENT_ID_KEY: document_id},
        )
        for doc in documents
    ]
