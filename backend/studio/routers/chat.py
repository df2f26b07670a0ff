from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import ConfigurationError, ProxyError, TopicRequiredError
from ..openai_client import OpenAIClient
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


class ChatRequest(BaseModel):
	topic: Optional[str] = None


def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
	# Overridden in tests with an httpx.MockTransport
	return None


async def _read_topic(request: Request) -> str:
	try:
		body: Any = await request.json()
		req = ChatRequest.model_validate(body)
	except ValueError:
		raise TopicRequiredError()
	if not req.topic or not req.topic.strip():
		raise TopicRequiredError()
	return req.topic


@router.post("/chat")
async def chat(
	request: Request,
	settings: Settings = Depends(get_settings),
	transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport),
) -> JSONResponse:
	try:
		if not settings.openai_api_key:
			raise ConfigurationError("Missing API key configuration on server.")
		topic = await _read_topic(request)
		async with OpenAIClient(
			settings.openai_api_key,
			base_url=settings.openai_base_url,
			timeout=settings.openai_timeout_seconds,
			transport=transport,
		) as client:
			data: Dict[str, Any] = await client.create_curriculum(topic)
		return JSONResponse(content=data)
	except ProxyError:
		raise
	except Exception:
		logger.exception("Server error while proxying chat request")
		raise ProxyError("Internal server error.")
