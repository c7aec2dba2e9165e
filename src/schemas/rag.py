from typing import Optional, List
from pydantic import BaseModel, Field

from src.schemas.domain import ChatMessage


class QueryRecordsRequest(BaseModel):
	dataset_id: str
	query: str
	group_ids: Optional[List[int]] = None
	tags: Optional[List[str]] = None
	similarity_threshold: float = 0.0
	history_msgs: List[ChatMessage] = Field(default_factory=list)


class UpsertRecordsRequest(BaseModel):
	id: str = Field(..., description="Internal record ID, used for the uploaded filename")
	dataset_id: str
	doc_id: Optional[str] = Field(default=None, description="Backend document ID; set to update in place")
	content: str
	group_ids: Optional[List[int]] = None
	tags: Optional[List[str]] = None


class DocumentMetadata(BaseModel):
	group_ids: List[int] = Field(default_factory=list)


class Document(BaseModel):
	id: str
	name: str = ""
	dataset_id: str = ""
	status: str = ""
	progress_msg: str = ""
	meta_data: DocumentMetadata = Field(default_factory=DocumentMetadata)
	tags: List[str] = Field(default_factory=list)
