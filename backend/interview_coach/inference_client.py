from __future__ import annotations
import httpx
from typing import Any, Dict, Optional
from .settings import settings

class InferenceClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.hf_api_key
		if not self.api_key:
			raise ValueError("HF_API_KEY is not configured")
		self.base_url = (base_url or settings.hf_base_url).rstrip("/")
		self.timeout = timeout if timeout is not None else settings.hf_timeout_seconds
		self._headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

	def url_for(self, model: str) -> str:
		return f"{self.base_url}/{model}"

	async def generate(self, model: str, prompt: str) -> str:
		payload: Dict[str, Any] = {
			"inputs": prompt,
			"parameters": {
				"max_new_tokens": settings.hf_max_new_tokens,
				"return_full_text": False,
				"temperature": settings.hf_temperature,
			},
		}
		r = await self._client.post(self.url_for(model), headers=self._headers, json=payload)
		r.raise_for_status()
		try:
			data = r.json()
			text = data[0]["generated_text"]
		except Exception:
			raise RuntimeError(f"Unexpected inference response: {r.text[:200]}")
		return text or ""

	async def aclose(self) -> None:
		await self._client.aclose()
