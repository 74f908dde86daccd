"""PDF upload ingestion service: parse, chunk, summarise, embed, and index."""

__version__ = "0.1.0"
