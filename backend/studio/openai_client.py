from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .errors import UpstreamError
from .settings import settings

logger = logging.getLogger(__name__)

MODEL = "gpt-4o-mini"
TEMPERATURE = 0.8
SYSTEM_PROMPT = "You are a curriculum designer. Create a table of contents."
USER_PROMPT_TEMPLATE = (
	'Create a curriculum table of contents for the topic: "{topic}". '
	"Provide 6-10 modules. Each module should include 2-4 lesson bullets. "
	"Keep it concise and imaginative."
)


def build_messages(topic: str) -> List[Dict[str, str]]:
	# Topic goes in raw; no trimming or escaping
	return [
		{"role": "system", "content": SYSTEM_PROMPT},
		{"role": "user", "content": USER_PROMPT_TEMPLATE.format(topic=topic)},
	]


def build_payload(topic: str) -> Dict[str, Any]:
	return {
		"model": MODEL,
		"temperature": TEMPERATURE,
		"messages": build_messages(topic),
	}


class OpenAIClient:
	def __init__(
		self,
		api_key: str,
		*,
		base_url: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key
		self.base_url = base_url or settings.openai_base_url
		self._headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		self._client = httpx.AsyncClient(
			timeout=timeout if timeout is not None else settings.openai_timeout_seconds,
			transport=transport,
		)

	async def create_curriculum(self, topic: str) -> Dict[str, Any]:
		"""Send one chat-completion request for ``topic`` and return the provider JSON untouched.

		Raises UpstreamError on a non-2xx answer. Network failures and
		undecodable bodies propagate as raised by httpx / json.
		"""
		logger.info("Requesting curriculum from %s (model=%s)", self.base_url, MODEL)
		r = await self._client.post(self.base_url, headers=self._headers, json=build_payload(topic))
		if not r.is_success:
			logger.warning("Provider answered %s", r.status_code)
			raise UpstreamError(r.status_code, r.text)
		return r.json()

	async def aclose(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> "OpenAIClient":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()
