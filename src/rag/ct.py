from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from src.config.settings import Settings, get_settings
from src.raglite import types as rl
from src.raglite.client import RagLiteClient
from src.rag.base import RAGService
from src.rag.errors import ConversionError, RAGConfigError, RAGOperationError
from src.rag.markdown import HTML2MDConverter
from src.schemas.domain import ChatMessage, Model, NodeContentChunk, Role
from src.schemas.rag import Document, DocumentMetadata, QueryRecordsRequest, UpsertRecordsRequest
from src.utils.html import is_likely_html
from src.utils.logging import get_logger

RETRIEVE_TOP_K = 10
DEFAULT_MAX_TOKENS = 8192

_HISTORY_ROLES = {Role.USER.value, Role.ASSISTANT.value}


def _to_chat_history(msgs: List[ChatMessage]) -> List[rl.ChatMessage]:
	# only user/assistant turns are meaningful to retrieval; others are dropped
	out: List[rl.ChatMessage] = []
	for msg in msgs:
		role = msg.role.value if isinstance(msg.role, Role) else str(msg.role)
		if role not in _HISTORY_ROLES:
			continue
		out.append(rl.ChatMessage(role=role, content=msg.content))
	return out


def _group_metadata(group_ids: Optional[List[int]]) -> Optional[Dict[str, Any]]:
	if group_ids:
		return {"group_ids": list(group_ids)}
	return None


def _model_config(model: Model, max_tokens: int) -> rl.AIModelConfig:
	# max_tokens travels in its own field only
	extra = {k: v for k, v in model.parameters.to_map().items() if k != "max_tokens"}
	return rl.AIModelConfig(
		api_base=model.base_url,
		api_key=model.api_key,
		max_tokens=max_tokens,
		extra_parameters=extra or None,
	)


class CTRAG(RAGService):
	"""RAGService backed by a RagLite server."""

	def __init__(
		self,
		settings: Optional[Settings] = None,
		client: Optional[RagLiteClient] = None,
		converter: Optional[HTML2MDConverter] = None,
	):
		settings = settings or get_settings()
		if client is None:
			try:
				client = RagLiteClient(
					settings.RAG_CT_BASE_URL,
					api_key=settings.RAG_CT_API_KEY,
					timeout=settings.RAG_TIMEOUT,
				)
			except ValueError as e:
				raise RAGConfigError(f"failed to create raglite client: {e}") from e
		self._client = client
		self._md_conv = converter or HTML2MDConverter()
		self._logger = get_logger("store.vector.ct")

	async def create_knowledge_base(self) -> str:
		dataset = await self._client.datasets.create(rl.CreateDatasetRequest(name=str(uuid4())))
		return dataset.id

	async def query_records(self, req: QueryRecordsRequest) -> Tuple[str, List[NodeContentChunk]]:
		chat_msgs = _to_chat_history(req.history_msgs)
		self._logger.debug({
			"event": "retrieving_by_history_msgs",
			"history_msgs": [m.model_dump(mode="json") for m in req.history_msgs],
			"chat_msgs": [m.model_dump() for m in chat_msgs],
		})
		data = rl.RetrieveRequest(
			dataset_id=req.dataset_id,
			query=req.query,
			top_k=RETRIEVE_TOP_K,
			similarity_threshold=req.similarity_threshold,
			metadata=_group_metadata(req.group_ids),
			tags=list(req.tags) if req.tags else None,
			chat_history=chat_msgs or None,
		)
		res = await self._client.search.retrieve(data)
		self._logger.info({"event": "retrieve_chunks_result", "chunks_count": len(res.results), "query": req.query})
		chunks = [
			NodeContentChunk(id=chunk.chunk_id, content=chunk.content, doc_id=chunk.document_id)
			for chunk in res.results
		]
		return res.query, chunks

	async def upsert_records(self, req: UpsertRecordsRequest) -> str:
		markdown = req.content
		# if the content is html, convert it to markdown first
		if is_likely_html(req.content):
			try:
				markdown = self._md_conv.convert_string(req.content)
			except Exception as e:
				raise ConversionError("convert html to markdown failed") from e
		data = rl.UploadDocumentRequest(
			dataset_id=req.dataset_id,
			document_id=req.doc_id or None,
			file=markdown.encode("utf-8"),
			filename=f"{req.id}.md",
			metadata=_group_metadata(req.group_ids),
			tags=list(req.tags) if req.tags else None,
		)
		try:
			res = await self._client.documents.upload(data)
		except Exception as e:
			raise RAGOperationError("upload document text failed") from e
		return res.document_id

	async def delete_records(self, dataset_id: str, doc_ids: List[str]) -> None:
		await self._client.documents.batch_delete(
			rl.BatchDeleteDocumentsRequest(dataset_id=dataset_id, document_ids=list(doc_ids))
		)

	async def delete_knowledge_base(self, dataset_id: str) -> None:
		await self._client.datasets.delete(dataset_id)

	async def update_document_group_ids(self, dataset_id: str, doc_id: str, group_ids: Optional[List[int]]) -> None:
		# None leaves group_ids untouched; [] clears them
		req = rl.UpdateDocumentRequest(
			dataset_id=dataset_id,
			document_id=doc_id,
			metadata={"group_ids": list(group_ids)} if group_ids is not None else None,
		)
		try:
			await self._client.documents.update(req)
		except Exception as e:
			raise RAGOperationError("update document group IDs failed") from e

	async def list_documents(self, dataset_id: str, document_ids: Optional[List[str]] = None) -> List[Document]:
		res = await self._client.documents.list(
			rl.ListDocumentsRequest(dataset_id=dataset_id, document_ids=document_ids or None)
		)
		return [
			Document(
				id=doc.id,
				name=doc.filename,
				dataset_id=doc.dataset_id,
				status=doc.status,
				progress_msg=doc.progress_msg,
				tags=doc.tags or [],
				meta_data=rl.decode(DocumentMetadata, doc.metadata),
			)
			for doc in res.documents
		]

	async def get_model_list(self) -> List[Model]:
		res = await self._client.models.list(rl.ListModelsRequest())
		# provider is not carried over
		return [
			Model(
				id=m.id,
				model=m.name,
				base_url=m.config.api_base,
				api_key=m.config.api_key,
				type=m.model_type,
			)
			for m in res.models
		]

	async def add_model(self, model: Model) -> str:
		created = await self._client.models.create(rl.CreateModelRequest(
			name=model.model,
			provider=model.provider,
			model_type=model.type,
			config=_model_config(model, DEFAULT_MAX_TOKENS),
			is_default=model.is_active,
		))
		return created.id

	async def upsert_model(self, model: Model) -> None:
		max_tokens = model.parameters.max_tokens or DEFAULT_MAX_TOKENS
		await self._client.models.upsert(rl.UpsertModelRequest(
			name=model.model,
			provider=model.provider,
			model_name=model.model,
			model_type=model.type,
			config=_model_config(model, max_tokens),
			is_default=model.is_active,
		))

	async def delete_model(self, model: Model) -> None:
		await self._client.models.delete(model.id)

	async def aclose(self) -> None:
		await self._client.aclose()
