from typing import List, Optional, Tuple
from abc import ABC, abstractmethod

from src.schemas.domain import Model, NodeContentChunk
from src.schemas.rag import Document, QueryRecordsRequest, UpsertRecordsRequest


class RAGService(ABC):
	"""
	Knowledge base operations backed by a remote RAG service.
	Implementations hold no mutable state between calls and are safe to share.
	"""

	@abstractmethod
	async def create_knowledge_base(self) -> str: ...

	@abstractmethod
	async def upsert_records(self, req: UpsertRecordsRequest) -> str: ...

	@abstractmethod
	async def query_records(self, req: QueryRecordsRequest) -> Tuple[str, List[NodeContentChunk]]: ...

	@abstractmethod
	async def delete_records(self, dataset_id: str, doc_ids: List[str]) -> None: ...

	@abstractmethod
	async def delete_knowledge_base(self, dataset_id: str) -> None: ...

	@abstractmethod
	async def update_document_group_ids(self, dataset_id: str, doc_id: str, group_ids: Optional[List[int]]) -> None: ...

	@abstractmethod
	async def list_documents(self, dataset_id: str, document_ids: Optional[List[str]] = None) -> List[Document]: ...

	@abstractmethod
	async def get_model_list(self) -> List[Model]: ...

	@abstractmethod
	async def add_model(self, model: Model) -> str: ...

	@abstractmethod
	async def upsert_model(self, model: Model) -> None: ...

	@abstractmethod
	async def delete_model(self, model: Model) -> None: ...

	async def aclose(self) -> None:
		"""Release network resources. No-op unless the implementation owns any."""

	async def __aenter__(self) -> "RAGService":
		return self

	async def __aexit__(self, exc_type, exc, tb) -> None:
		await self.aclose()
