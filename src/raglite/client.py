"""
Async client for the RagLite RAG service.

Only the endpoints used by the RAG store adapter are modelled. One method call is
one HTTP round trip; there is no retry and no caching.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote, urlparse

import httpx

from src.raglite import types
from src.raglite.errors import RagLiteAPIError, RagLiteConnectionError

API_PREFIX = "/api/v1"


def _build_headers(api_key: Optional[str]) -> Dict[str, str]:
	headers = {"Accept": "application/json"}
	if api_key:
		headers["Authorization"] = f"Bearer {api_key}"
	return headers


def _segment(value: Optional[str]) -> str:
	"""Escape an ID for use as exactly one URL path segment."""
	if not value or value in (".", ".."):
		raise ValueError(f"invalid path id: {value!r}")
	return quote(value, safe="")


def _unwrap(resp: httpx.Response) -> Any:
	"""Decode a response, unwrapping the {"code", "message", "data"} envelope when present."""
	try:
		body = resp.json() if resp.content else None
	except ValueError:
		body = None
	if resp.is_error:
		message = resp.text[:200]
		code = None
		if isinstance(body, dict):
			message = str(body.get("message") or body.get("detail") or message)
			code = body.get("code")
		raise RagLiteAPIError(resp.status_code, message, code=code)
	if isinstance(body, dict) and "code" in body and ("data" in body or "message" in body):
		if body.get("code"):
			raise RagLiteAPIError(resp.status_code, str(body.get("message", "")), code=body.get("code"))
		return body.get("data")
	return body


class _Service:
	def __init__(self, client: "RagLiteClient"):
		self._client = client


class DatasetsService(_Service):
	async def create(self, req: types.CreateDatasetRequest) -> types.Dataset:
		data = await self._client.request("POST", "/datasets", json=req.to_payload())
		return types.Dataset.model_validate(data)

	async def delete(self, dataset_id: str) -> None:
		await self._client.request("DELETE", f"/datasets/{_segment(dataset_id)}")


class DocumentsService(_Service):
	async def upload(self, req: types.UploadDocumentRequest) -> types.UploadDocumentResponse:
		data = await self._client.request("POST", f"/datasets/{_segment(req.dataset_id)}/documents", **req.to_multipart())
		return types.UploadDocumentResponse.model_validate(data)

	async def batch_delete(self, req: types.BatchDeleteDocumentsRequest) -> None:
		await self._client.request(
			"DELETE",
			f"/datasets/{_segment(req.dataset_id)}/documents",
			json={"document_ids": req.document_ids},
		)

	async def update(self, req: types.UpdateDocumentRequest) -> types.Document:
		payload = req.to_payload(exclude={"dataset_id", "document_id"})
		data = await self._client.request(
			"PUT",
			f"/datasets/{_segment(req.dataset_id)}/documents/{_segment(req.document_id)}",
			json=payload,
		)
		if not isinstance(data, dict):
			data = {"id": req.document_id}
		return types.Document.model_validate(data)

	async def list(self, req: types.ListDocumentsRequest) -> types.ListDocumentsResponse:
		params = {"document_ids": req.document_ids} if req.document_ids else None
		data = await self._client.request("GET", f"/datasets/{_segment(req.dataset_id)}/documents", params=params)
		if isinstance(data, list):
			data = {"documents": data, "total": len(data)}
		return types.ListDocumentsResponse.model_validate(data or {})


class SearchService(_Service):
	async def retrieve(self, req: types.RetrieveRequest) -> types.RetrieveResponse:
		data = await self._client.request("POST", "/search/retrieve", json=req.to_payload())
		return types.RetrieveResponse.model_validate(data or {})


class ModelsService(_Service):
	async def create(self, req: types.CreateModelRequest) -> types.ModelConfig:
		data = await self._client.request("POST", "/models", json=req.to_payload())
		return types.ModelConfig.model_validate(data)

	async def upsert(self, req: types.UpsertModelRequest) -> types.ModelConfig:
		data = await self._client.request("PUT", "/models", json=req.to_payload())
		return types.ModelConfig.model_validate(data)

	async def list(self, req: Optional[types.ListModelsRequest] = None) -> types.ListModelsResponse:
		params = (req or types.ListModelsRequest()).to_payload() or None
		data = await self._client.request("GET", "/models", params=params)
		if isinstance(data, list):
			data = {"models": data}
		return types.ListModelsResponse.model_validate(data or {})

	async def delete(self, model_id: str) -> None:
		await self._client.request("DELETE", f"/models/{_segment(model_id)}")


class RagLiteClient:
	"""
	Entry point mirroring the service's resource groups:
	client.datasets, client.documents, client.search, client.models.

	Pass ``http_client`` to reuse a caller-owned httpx.AsyncClient (tests use
	one with httpx.MockTransport); it is then left open by aclose().
	"""

	def __init__(
		self,
		base_url: Optional[str],
		api_key: Optional[str] = None,
		timeout: float = 30.0,
		http_client: Optional[httpx.AsyncClient] = None,
	):
		parsed = urlparse(base_url or "")
		if parsed.scheme not in ("http", "https") or not parsed.hostname:
			raise ValueError(f"invalid base url: {base_url!r}")
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self._headers = _build_headers(api_key)
		self._close_client = http_client is None
		self._http = http_client or httpx.AsyncClient(timeout=timeout)

		self.datasets = DatasetsService(self)
		self.documents = DocumentsService(self)
		self.search = SearchService(self)
		self.models = ModelsService(self)

	async def request(self, method: str, path: str, **kwargs: Any) -> Any:
		url = f"{self.base_url}{API_PREFIX}{path}"
		try:
			resp = await self._http.request(method, url, headers=self._headers, timeout=self.timeout, **kwargs)
		except httpx.TimeoutException as e:
			raise RagLiteConnectionError(f"{method} {path} timed out after {self.timeout}s") from e
		except httpx.RequestError as e:
			raise RagLiteConnectionError(f"{method} {path} failed: {e}") from e
		return _unwrap(resp)

	async def aclose(self) -> None:
		if self._close_client:
			await self._http.aclose()

	async def __aenter__(self) -> "RagLiteClient":
		return self

	async def __aexit__(self, exc_type, exc, tb) -> None:
		await self.aclose()
