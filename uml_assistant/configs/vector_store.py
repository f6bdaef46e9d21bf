"""
Vector store configuration settings.

Manages the local FAISS index used for context retrieval and the
maximal-marginal-relevance search budget.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS index built by the ingestion job)."""

    index_dir: str = Field(
        default=".faiss_index",
        description="Directory holding the persisted FAISS index",
    )
    index_name: str = Field(default="documents", description="FAISS index file name")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )

    search_type: str = Field(
        default="mmr",
        description="Retriever search type ('mmr' or 'similarity')",
    )
    top_k: int = Field(default=4, ge=1, description="Number of fragments returned")
    fetch_k: int = Field(
        default=5,
        ge=1,
        description="Candidate budget fetched before MMR selection",
    )

    class Config:
        """Pydantic config."""

        env_prefix = "VECTOR_STORE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
