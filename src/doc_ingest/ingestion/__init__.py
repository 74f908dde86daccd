"""
Ingestion — turns an uploaded document into indexed, summarised chunks.

Every collaborator (PDF parser, splitter, chat model, embeddings, vector
index) is an external library; this package only orchestrates them.

Public API
----------
- :class:`IngestionPipeline` — run one upload end to end.
- :class:`UploadResult` — what the caller gets back.
"""

from doc_ingest.ingestion.pipeline import IngestionPipeline, UploadResult

__all__ = ["IngestionPipeline", "UploadResult"]
