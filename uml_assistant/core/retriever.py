"""
Context retrieval for the response pipeline.

Wraps a LangChain vector store retriever with maximal-marginal-relevance
selection over a fixed candidate budget.

Dependencies: langchain_core, uml_assistant.core.exceptions
System role: RAG retrieval business logic
"""

import logging

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore

from uml_assistant.core.exceptions import RetrievalError

logger = logging.getLogger(__name__)


class ContextRetriever:
    """
    Read-only retrieval of supporting fragments for a user query.

    A retriever without a vector store always yields an empty list, which
    prompt templates render as "No additional information.".
    """

    def __init__(
        self,
        vector_store: VectorStore | None,
        search_type: str = "mmr",
        k: int = 4,
        fetch_k: int = 5,
    ) -> None:
        """
        Initialize retriever.

        Args:
            vector_store: Loaded LangChain vector store (None disables retrieval)
            search_type: Retriever search type ("mmr" or "similarity")
            k: Number of fragments returned
            fetch_k: Candidate budget fetched before MMR selection
        """
        self._vector_store = vector_store
        self._search_type = search_type
        self._search_kwargs = {"k": k, "fetch_k": fetch_k} if search_type == "mmr" else {"k": k}

    @property
    def is_enabled(self) -> bool:
        return self._vector_store is not None

    async def aretrieve(self, query: str) -> list[Document]:
        """
        Retrieve an ordered list of fragments relevant to the query.

        Args:
            query: Latest user message

        Returns:
            list[Document]: Retrieved fragments, possibly empty

        Raises:
            RetrievalError: If the vector store query fails
        """
        if self._vector_store is None or not query.strip():
            return []

        logger.info(f"{__name__}:aretrieve - START query_len={len(query)} search_type={self._search_type}")
        try:
            retriever = self._vector_store.as_retriever(
                search_type=self._search_type,
                search_kwargs=self._search_kwargs,
            )
            documents = await retriever.ainvoke(query)
        except Exception as e:
            logger.error(f"{__name__}:aretrieve - FAILED {type(e).__name__}: {e}")
            raise RetrievalError(
                "Context retrieval failed",
                operation="retrieve",
                details={"error": str(e)},
            ) from e

        logger.info(f"{__name__}:aretrieve - END fragments={len(documents)}")
        return list(documents)
