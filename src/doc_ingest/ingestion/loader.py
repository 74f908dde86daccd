"""Document loaders — thin wrappers around LangChain document loaders."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import PyPDFLoader

from doc_ingest.errors import ParseError

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)


def load_pdf(path: str | Path) -> list[Document]:
    """Load a single PDF file, one ``Document`` per page."""
    return PyPDFLoader(str(path)).load()


def load_pdf_bytes(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
) -> list[Document]:
    """Parse an in-memory PDF upload into page documents.

    The payload is spooled to a temporary file because ``PyPDFLoader``
    reads from disk.  The file is removed again whatever the outcome.

    Parameters
    ----------
    data:
        Raw bytes of the uploaded file.
    filename:
        Client-supplied name; replaces the temporary path in each page's
        ``source`` metadata.
    content_type:
        Declared media type.  Only logged: the parser decides what it
        can read.

    Raises
    ------
    ParseError
        When the parser rejects the payload.
    """
    logger.debug("Parsing upload %r (%s, %d bytes)", filename, content_type, len(data))

    with tempfile.NamedTemporaryFile(delete=False, suffix=".pdf") as tmp:
        tmp.write(data)
        tmp_path = tmp.name

    try:
        pages = load_pdf(tmp_path)
    except Exception as exc:
        raise ParseError(str(exc)) from exc
    finally:
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.warning("Could not delete temporary file %s", tmp_path, exc_info=True)

    source = filename or "upload.pdf"
    for page in pages:
        page.metadata["source"] = source
    return pages
