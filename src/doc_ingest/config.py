"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # LLM
    openai_api_key: str = Field(default="", description="OpenAI API key, used for chat and embeddings")
    llm_model_name: str = Field(default="gpt-3.5-turbo", description="Chat model used for summaries")
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL for an OpenAI-compatible chat endpoint. "
            "Leave empty to use OpenAI cloud."
        ),
    )

    # Embedding
    embedding_model: str = "text-embedding-3-small"
    embedding_batch_size: int = Field(default=5, description="Texts per embedding request; small to avoid rate limits")

    # Vector store
    pinecone_api_key: str = ""
    pinecone_index_name: str = ""

    # Chunking
    chunk_size: int = 1000
    chunk_overlap: int = 200

    # Pipeline
    summary_chunk_count: int = 3
    upload_retries: int = Field(default=3, description="Store-write retries after the first attempt")
    upload_retry_backoff: float = Field(default=1.0, description="Exponential backoff multiplier in seconds")

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def missing(self, *fields: str) -> list[str]:
        """Return the names of *fields* that are unset or empty."""
        return [name for name in fields if not getattr(self, name, None)]


REQUIRED_SETTINGS = ("openai_api_key", "pinecone_api_key", "pinecone_index_name")

# Singleton — import `settings` wherever needed.
settings = Settings()
