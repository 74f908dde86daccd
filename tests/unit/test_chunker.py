"""Unit tests for the chunker module."""

from langchain_core.documents import Document

from doc_ingest.ingestion.chunker import DOCUMENT_ID_KEY, chunk_documents, tag_documents


def test_chunk_documents_splits_long_text() -> None:
    """A document longer than chunk_size should be split."""
    long_text = "word " * 500  # ~2500 chars
    docs = [Document(page_content=long_text, metadata={"source": "test"})]
    chunks = chunk_documents(docs, chunk_size=256, chunk_overlap=32)
    assert len(chunks) > 1


def test_chunk_documents_respects_default_size() -> None:
    """With the default 1000/200 settings no chunk exceeds 1000 characters."""
    text = "\n\n".join(f"Paragraph {i}. " + "lorem ipsum dolor " * 20 for i in range(40))
    chunks = chunk_documents([Document(page_content=text)])
    assert len(chunks) > 1
    assert all(len(c.page_content) <= 1000 for c in chunks)


def test_chunk_documents_overlap_is_bounded() -> None:
    """Adjacent chunks share at most chunk_overlap characters."""
    text = " ".join(f"w{i:04d}" for i in range(1000))
    chunks = chunk_documents([Document(page_content=text)], chunk_size=1000, chunk_overlap=200)
    for left, right in zip(chunks, chunks[1:]):
        shared = 0
        for size in range(1, min(len(left.page_content), len(right.page_content)) + 1):
            if left.page_content.endswith(right.page_content[:size]):
                shared = size
        assert 0 < shared <= 200


def test_chunk_documents_preserves_metadata() -> None:
    """Metadata from the source document should be preserved in chunks."""
    docs = [Document(page_content="Short text.", metadata={"source": "test.pdf", "page": 2})]
    chunks = chunk_documents(docs, chunk_size=256, chunk_overlap=0)
    assert all(c.metadata == {"source": "test.pdf", "page": 2} for c in chunks)


def test_chunk_documents_empty_input() -> None:
    """An empty list should return an empty list."""
    assert chunk_documents([]) == []


def test_tag_documents_adds_document_id() -> None:
    docs = [Document(page_content="a", metadata={"page": 0}), Document(page_content="b")]
    tagged = tag_documents(docs, "doc-123")
    assert [d.metadata[DOCUMENT_ID_KEY] for d in tagged] == ["doc-123", "doc-123"]
    assert tagged[0].metadata["page"] == 0
    assert [d.page_content for d in tagged] == ["a", "b"]


def test_tag_documents_does_not_mutate_input() -> None:
    docs = [Document(page_content="a", metadata={"page": 0})]
    tag_documents(docs, "doc-123")
    assert docs[0].metadata == {"page": 0}
