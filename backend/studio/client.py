"""
Curriculum Studio client
========================

UI state machine for the single-page app, driven over HTTP against the
``/api/chat`` proxy.

A generate action runs two coroutines side by side and completes when both
finish:

- the stage flow, a purely cosmetic 2 -> 3 -> 4 progression on fixed delays;
- the network request, whose result fills ``curriculum``.

Duplicate submissions are not guarded; overlapping actions interleave their
writes and the last one to land wins.

The admin unlock is a local string comparison that flips a display mode. The
code ships with the client configuration, so it grants nothing.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

import httpx
from pydantic import BaseModel

from .settings import settings


@dataclass(frozen=True)
class Stage:
	id: int
	label: str
	description: str


STAGES: List[Stage] = [
	Stage(1, "Topic input", "Enter an academic focus area."),
	Stage(2, "Gathering links", "Indexing scholarly and industry sources."),
	Stage(3, "Pulling insights", "Synthesizing key concepts and outcomes."),
	Stage(4, "Generating curriculum", "Drafting the program structure and TOC."),
]

# Seconds spent on stage 2 and stage 3 before moving on
STAGE_DELAYS = (1.3, 1.5)

CHAT_PATH = "/api/chat"
NO_CURRICULUM = "No curriculum returned. Try again."
EMPTY_TOPIC_ERROR = "Please enter a topic to continue."
GENERIC_ERROR = "Something went wrong. Try again."
INVALID_ADMIN_CODE = "Invalid admin code."


class UIState(BaseModel):
	topic: str = ""
	stage: int = 1
	curriculum: str = ""
	error: str = ""
	is_loading: bool = False
	is_admin_open: bool = False
	admin_code: str = ""
	is_full_page_mode: bool = False


class ChatRequestError(RuntimeError):
	pass


def extract_curriculum(data: Any) -> str:
	"""Text of the first completion choice, or the placeholder when it is missing or empty."""
	try:
		content = data["choices"][0]["message"]["content"]
	except (KeyError, IndexError, TypeError):
		return NO_CURRICULUM
	return content or NO_CURRICULUM


def stage_index(stage: int) -> int:
	for index, item in enumerate(STAGES):
		if item.id == stage:
			return index
	return -1


def stage_message(stage: int) -> str:
	index = stage_index(stage)
	return STAGES[index].description if index >= 0 else ""


def stage_statuses(stage: int) -> List[str]:
	current = stage_index(stage)
	statuses = []
	for index, _ in enumerate(STAGES):
		if current > index:
			statuses.append("complete")
		elif current == index:
			statuses.append("active")
		else:
			statuses.append("idle")
	return statuses


def progress_percent(stage: int) -> float:
	return (stage_index(stage) + 1) / len(STAGES) * 100


class CurriculumStudio:
	def __init__(
		self,
		http: Optional[httpx.AsyncClient] = None,
		*,
		admin_code: Optional[str] = None,
		sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
		on_change: Optional[Callable[[UIState], None]] = None,
	) -> None:
		self.http = http
		self.secret_code = admin_code if admin_code is not None else settings.admin_code
		self.state = UIState()
		self._sleep = sleep
		self._on_change = on_change

	def _update(self, **changes: Any) -> None:
		for name, value in changes.items():
			setattr(self.state, name, value)
		if self._on_change is not None:
			self._on_change(self.state)

	# ---- topic / generate ----

	def set_topic(self, topic: str) -> None:
		self._update(topic=topic)

	async def generate(self) -> None:
		if not self.state.topic.strip():
			self._update(error=EMPTY_TOPIC_ERROR)
			return

		self._update(is_loading=True, error="", curriculum="")
		try:
			content, _ = await asyncio.gather(self._request_curriculum(self.state.topic), self._stage_flow())
			self._update(curriculum=content)
		except Exception as err:
			self._update(error=str(err) or GENERIC_ERROR)
		finally:
			self._update(is_loading=False)

	async def _stage_flow(self) -> None:
		self._update(stage=2)
		await self._sleep(STAGE_DELAYS[0])
		self._update(stage=3)
		await self._sleep(STAGE_DELAYS[1])
		self._update(stage=4)

	async def _request_curriculum(self, topic: str) -> str:
		if self.http is None:
			raise ChatRequestError("No studio server configured.")
		response = await self.http.post(CHAT_PATH, json={"topic": topic})
		if not response.is_success:
			error_data: Any = response.json()
			# Proxies in front of the server may answer with any JSON shape
			message = error_data.get("error") if isinstance(error_data, dict) else None
			raise ChatRequestError(message or f"Server error: {response.status_code}")
		return extract_curriculum(response.json())

	# ---- admin modal ----

	def open_admin(self) -> None:
		self._update(is_admin_open=True)

	def close_admin(self) -> None:
		self._update(is_admin_open=False)

	def set_admin_code(self, code: str) -> None:
		self._update(admin_code=code)

	def submit_admin(self) -> bool:
		if self.state.admin_code.strip() == self.secret_code:
			self._update(is_full_page_mode=True, is_admin_open=False, admin_code="", error="")
			return True
		self._update(error=INVALID_ADMIN_CODE)
		return False

	def exit_full_page_mode(self) -> None:
		self._update(is_full_page_mode=False)

	# ---- derived views ----

	@property
	def stage_index(self) -> int:
		return stage_index(self.state.stage)

	@property
	def stage_message(self) -> str:
		return stage_message(self.state.stage)
