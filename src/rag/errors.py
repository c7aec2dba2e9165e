class RAGError(Exception):
	"""Base class for RAG store errors."""


class RAGConfigError(RAGError):
	"""The RAG service could not be built from the current configuration."""


class UnsupportedProviderError(RAGConfigError):
	def __init__(self, provider: str):
		self.provider = provider
		super().__init__(f"unsupported vector provider: {provider}")


class ConversionError(RAGError):
	"""HTML to Markdown normalization failed; nothing was uploaded."""


class RAGOperationError(RAGError):
	"""A backend call failed; the original error is kept as __cause__."""

	def __init__(self, operation: str):
		self.operation = operation
		super().__init__(operation)
