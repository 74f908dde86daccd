"""FastAPI application exposing document upload as a REST API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from doc_ingest import __version__
from doc_ingest.config import REQUIRED_SETTINGS, settings
from doc_ingest.errors import ConfigurationError, MissingFileError
from doc_ingest.ingestion.pipeline import IngestionPipeline, UploadResult

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate settings and build the pipeline once per process."""
    logging.basicConfig(level=settings.log_level)

    missing = settings.missing(*REQUIRED_SETTINGS)
    if missing:
        raise ConfigurationError(
            "Missing required settings: " + ", ".join(name.upper() for name in missing)
        )

    from doc_ingest.ingestion.embedder import get_pinecone_index

    app.state.pipeline = IngestionPipeline.from_settings(get_pinecone_index())
    logger.info("Upload service ready (index=%s)", settings.pinecone_index_name)
    yield


app = FastAPI(
    title="Document Ingestion API",
    version=__version__,
    description="Upload a PDF to have it summarised, embedded, and indexed.",
    lifespan=lifespan,
)


def get_pipeline(request: Request) -> IngestionPipeline:
    """Return the pipeline built at startup."""
    return request.app.state.pipeline


async def _read_upload(request: Request) -> tuple[bytes, str | None, str | None]:
    """Return the uploaded file's bytes, filename and content type.

    The form is closed before returning, which releases its spooled files.
    """
    try:
        async with request.form() as form:
            upload = form.get("file")
            if not isinstance(upload, UploadFile):
                raise MissingFileError()
            return await upload.read(), upload.filename, upload.content_type
    except (HTTPException, MultiPartException) as exc:
        raise MissingFileError() from exc


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/api/upload", response_model=UploadResult)
async def upload(request: Request, pipeline: IngestionPipeline = Depends(get_pipeline)):
    """Ingest an uploaded PDF and return its summary and document id."""
    try:
        data, filename, content_type = await _read_upload(request)
    except MissingFileError as exc:
        return PlainTextResponse(str(exc), status_code=400)

    try:
        return await run_in_threadpool(pipeline.ingest, data, filename, content_type)
    except Exception as exc:
        logger.exception("Upload error")
        return PlainTextResponse(str(exc) or "Unknown error", status_code=500)


def main() -> None:
    """Run the service under uvicorn (``doc-ingest-serve``)."""
    import uvicorn

    uvicorn.run("doc_ingest.serving.app:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
