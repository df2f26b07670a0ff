import json
from typing import Any, Callable, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from studio.main import app
from studio.routers import chat as chat_routes
from studio.settings import Settings, get_settings


class FakeProvider:
	"""Stands in for the chat-completion endpoint and records what reaches it."""

	def __init__(self) -> None:
		self.requests: List[httpx.Request] = []
		self.status_code = 200
		self.body: Any = {"choices": [{"message": {"content": "Module 1: Foundations"}}]}
		self.raw: Optional[bytes] = None
		self.error: Optional[Exception] = None

	def respond(self, status_code: int = 200, body: Any = None, raw: Optional[bytes] = None) -> None:
		self.status_code = status_code
		self.body = body
		self.raw = raw

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if self.error is not None:
			raise self.error
		if self.raw is not None:
			return httpx.Response(self.status_code, content=self.raw)
		return httpx.Response(self.status_code, json=self.body)

	@property
	def last_payload(self) -> dict:
		return json.loads(self.requests[-1].content)


def make_settings(**overrides: Any) -> Settings:
	values = {
		"OPENAI_API_KEY": "sk-test",
		"OPENAI_BASE_URL": "https://provider.test/v1/chat/completions",
		"ADMIN_CODE": "CURRICULUM2026",
	}
	values.update(overrides)
	return Settings(_env_file=None, **values)


@pytest.fixture
def provider():
	return FakeProvider()


@pytest.fixture
def use_settings() -> Callable[..., Settings]:
	def _use(**overrides: Any) -> Settings:
		configured = make_settings(**overrides)
		app.dependency_overrides[get_settings] = lambda: configured
		return configured

	_use()
	yield _use
	app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def api(provider, use_settings):
	app.dependency_overrides[chat_routes.get_upstream_transport] = lambda: httpx.MockTransport(provider.handler)
	yield TestClient(app)
	app.dependency_overrides.pop(chat_routes.get_upstream_transport, None)


@pytest_asyncio.fixture
async def http(api):
	# Client-side tests talk to the same ASGI app the api fixture configures
	async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as client:
		yield client
