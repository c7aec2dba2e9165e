from typing import Optional


class RagLiteError(Exception):
	"""Base error for RagLite backend calls."""


class RagLiteAPIError(RagLiteError):
	"""The backend answered, but with a non-2xx status or a non-zero envelope code."""

	def __init__(self, status_code: int, message: str, code: Optional[int] = None):
		self.status_code = status_code
		self.code = code
		self.message = message
		detail = f"raglite api error (status={status_code}"
		if code is not None:
			detail += f", code={code}"
		super().__init__(f"{detail}): {message}")


class RagLiteConnectionError(RagLiteError):
	"""Transport failure or timeout before a response was received."""
