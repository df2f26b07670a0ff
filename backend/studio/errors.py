from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse


class ProxyError(Exception):
	"""Failure of the chat proxy, rendered to the caller as ``{"error": message}``."""

	status_code: int = 500

	def __init__(self, message: str, status_code: int | None = None) -> None:
		super().__init__(message)
		self.message = message
		if status_code is not None:
			self.status_code = status_code


class ConfigurationError(ProxyError):
	status_code = 500


class TopicRequiredError(ProxyError):
	status_code = 400

	def __init__(self, message: str = "Topic is required.") -> None:
		super().__init__(message)


class UpstreamError(ProxyError):
	"""Non-2xx answer from the provider; keeps the provider's status code."""

	def __init__(self, status_code: int, details: str) -> None:
		super().__init__(f"OpenAI error: {details}", status_code=status_code)
		self.details = details


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
