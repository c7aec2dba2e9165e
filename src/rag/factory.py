from typing import Optional

from src.config.settings import Settings, get_settings
from src.rag.base import RAGService
from src.rag.ct import CTRAG
from src.rag.errors import UnsupportedProviderError


def new_rag_service(settings: Optional[Settings] = None) -> RAGService:
	"""
	Build the RAG service selected by RAG_PROVIDER.
	Unknown providers fail before any backend client is created.
	"""
	settings = settings or get_settings()
	provider = settings.RAG_PROVIDER
	if provider == "ct":
		return CTRAG(settings)
	raise UnsupportedProviderError(provider)
