from enum import Enum
from typing import Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
	SYSTEM = "system"
	USER = "user"
	ASSISTANT = "assistant"
	TOOL = "tool"


class ModelType(str, Enum):
	CHAT = "chat"
	EMBEDDING = "embedding"
	RERANK = "rerank"
	ANALYSIS = "analysis"
	ANALYSIS_VL = "analysis-vl"


class ChatMessage(BaseModel):
	role: Union[Role, str] = Field(..., description="One of system, user, assistant, tool")
	content: str = ""


class NodeContentChunk(BaseModel):
	id: str
	content: str
	doc_id: str


class ModelParameters(BaseModel):
	model_config = ConfigDict(extra="allow")

	max_tokens: int = 0
	context_window: Optional[int] = None
	temperature: Optional[float] = None
	top_p: Optional[float] = None
	supports_images: Optional[bool] = None
	supports_computer_use: Optional[bool] = None
	supports_prompt_cache: Optional[bool] = None

	def to_map(self) -> Dict[str, Any]:
		"""Parameters that were set (not None) as a plain dict, for a backend's extra-parameter field."""
		return {k: v for k, v in self.model_dump().items() if v is not None}


class Model(BaseModel):
	id: str = ""
	model: str = Field(default="", description="Model name as known to the provider")
	provider: str = ""
	type: str = ModelType.CHAT.value
	base_url: str = ""
	api_key: str = ""
	is_active: bool = False
	parameters: ModelParameters = Field(default_factory=ModelParameters)
