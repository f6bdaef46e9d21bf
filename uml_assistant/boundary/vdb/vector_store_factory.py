"""
Vector store factory for the local FAISS document index.

The index is built by a separate ingestion job; this service only loads it.
A missing index is not an error: retrieval then yields no fragments.

Dependencies: langchain_community.vectorstores, langchain_google_genai, uml_assistant.configs
System role: Vector store instantiation
"""

import logging
from pathlib import Path

from langchain_community.vectorstores import FAISS
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from uml_assistant.configs import get_settings
from uml_assistant.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def get_vector_store() -> FAISS | None:
    """
    Load the persisted FAISS index with Gemini embeddings.

    Returns:
        FAISS: Loaded vector store, or None when no index exists on disk

    Raises:
        VectorStoreError: If an index exists but cannot be loaded
    """
    vs_settings = get_settings().vector_store
    index_dir = Path(vs_settings.index_dir)
    index_file = index_dir / f"{vs_settings.index_name}.faiss"

    if not index_file.exists():
        logger.warning(
            f"{__name__}:get_vector_store - No FAISS index at {index_file}, retrieval disabled"
        )
        return None

    logger.info(f"{__name__}:get_vector_store - START loading index={index_file}")
    try:
        embeddings = GoogleGenerativeAIEmbeddings(model=vs_settings.embedding_model)
        store = FAISS.load_local(
            str(index_dir),
            embeddings,
            index_name=vs_settings.index_name,
            allow_dangerous_deserialization=True,
        )
    except Exception as e:
        logger.error(f"{__name__}:get_vector_store - FAILED {type(e).__name__}: {e}")
        raise VectorStoreError(
            "Failed to load FAISS index",
            operation="load_index",
            details={"index_dir": str(index_dir), "error": str(e)},
        ) from e

    logger.info(f"{__name__}:get_vector_store - END index loaded")
    return store
