"""
Request/response models for the RagLite HTTP API.

Optional fields default to None and requests are serialized with
``exclude_none=True``, so an absent value is never sent as an empty container.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar
import json

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

T = TypeVar("T", bound=BaseModel)


def decode(model_cls: Type[T], raw: Any) -> T:
	"""
	Best-effort decode of a free-form blob (dict or JSON string) into model_cls.
	Falls back to the zero value when the blob is missing or does not fit.
	"""
	if isinstance(raw, (str, bytes)):
		try:
			raw = json.loads(raw)
		except ValueError:
			raw = None
	if not isinstance(raw, dict):
		return model_cls()
	try:
		return model_cls.model_validate(raw)
	except ValidationError:
		return model_cls()


class _Request(BaseModel):
	def to_payload(self, **kwargs: Any) -> Dict[str, Any]:
		return self.model_dump(exclude_none=True, **kwargs)


# ----- datasets -----
class CreateDatasetRequest(_Request):
	name: str
	description: Optional[str] = None


class Dataset(BaseModel):
	id: str = Field(validation_alias=AliasChoices("id", "dataset_id"))
	name: str = ""


# ----- documents -----
class UploadDocumentRequest(_Request):
	dataset_id: str
	document_id: Optional[str] = None
	file: bytes
	filename: str
	metadata: Optional[Dict[str, Any]] = None
	tags: Optional[List[str]] = None

	def to_multipart(self) -> Dict[str, Any]:
		data: Dict[str, str] = {}
		if self.document_id:
			data["document_id"] = self.document_id
		if self.metadata is not None:
			data["metadata"] = json.dumps(self.metadata, ensure_ascii=False, separators=(",", ":"))
		if self.tags is not None:
			data["tags"] = json.dumps(self.tags, ensure_ascii=False, separators=(",", ":"))
		files = {"file": (self.filename, self.file, "text/markdown")}
		return {"data": data, "files": files}


class UploadDocumentResponse(BaseModel):
	document_id: str = Field(validation_alias=AliasChoices("document_id", "id"))


class BatchDeleteDocumentsRequest(_Request):
	dataset_id: str
	document_ids: List[str] = Field(default_factory=list)


class UpdateDocumentRequest(_Request):
	dataset_id: str
	document_id: str
	metadata: Optional[Dict[str, Any]] = None
	tags: Optional[List[str]] = None


class ListDocumentsRequest(_Request):
	dataset_id: str
	document_ids: Optional[List[str]] = None


class Document(BaseModel):
	id: str
	filename: str = ""
	dataset_id: str = ""
	status: str = ""
	progress_msg: str = ""
	tags: Optional[List[str]] = None
	metadata: Any = None


class ListDocumentsResponse(BaseModel):
	documents: List[Document] = Field(default_factory=list)
	total: int = 0


# ----- search -----
class ChatMessage(BaseModel):
	role: str
	content: str


class RetrieveRequest(_Request):
	dataset_id: str
	query: str
	top_k: int = 10
	similarity_threshold: float = 0.0
	metadata: Optional[Dict[str, Any]] = None
	tags: Optional[List[str]] = None
	chat_history: Optional[List[ChatMessage]] = None


class RetrieveResult(BaseModel):
	chunk_id: str
	content: str = ""
	document_id: str = ""
	score: float = 0.0


class RetrieveResponse(BaseModel):
	query: str = ""
	results: List[RetrieveResult] = Field(default_factory=list)


# ----- models -----
class AIModelConfig(BaseModel):
	api_base: str = ""
	api_key: str = ""
	max_tokens: Optional[int] = None
	extra_parameters: Optional[Dict[str, Any]] = None


class CreateModelRequest(_Request):
	model_config = ConfigDict(protected_namespaces=())

	name: str
	provider: str
	model_type: str
	config: AIModelConfig = Field(default_factory=AIModelConfig)
	is_default: bool = False


class UpsertModelRequest(CreateModelRequest):
	model_name: str = ""


class ModelConfig(BaseModel):
	model_config = ConfigDict(protected_namespaces=())

	id: str
	name: str = ""
	provider: str = ""
	model_name: str = ""
	model_type: str = ""
	config: AIModelConfig = Field(default_factory=AIModelConfig)
	is_default: bool = False


class ListModelsRequest(_Request):
	model_config = ConfigDict(protected_namespaces=())

	provider: Optional[str] = None
	model_type: Optional[str] = None


class ListModelsResponse(BaseModel):
	models: List[ModelConfig] = Field(default_factory=list)
