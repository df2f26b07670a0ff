from __future__ import annotations
import argparse
import asyncio
import sys
from typing import List, Optional, TextIO

import httpx

from .client import STAGES, CurriculumStudio, UIState, stage_index
from .logger import setup_logging
from .settings import settings


class StageRenderer:
	"""Prints each stage the first time it becomes active."""

	def __init__(self, out: TextIO) -> None:
		self.out = out
		self._last_stage: Optional[int] = None

	def __call__(self, state: UIState) -> None:
		if state.stage == self._last_stage:
			return
		self._last_stage = state.stage
		index = stage_index(state.stage)
		if index < 0:
			return
		item = STAGES[index]
		print(f"[{item.id:02d}] {item.label} - {item.description}", file=self.out)


async def run_generate(topic: str, http: httpx.AsyncClient, out: Optional[TextIO] = None) -> int:
	out = out or sys.stdout
	studio = CurriculumStudio(http, on_change=StageRenderer(out))
	studio.set_topic(topic)
	await studio.generate()
	if studio.state.error:
		print(f"Error: {studio.state.error}", file=out)
		return 1
	print("", file=out)
	print(studio.state.curriculum, file=out)
	return 0


def run_unlock(code: str, out: Optional[TextIO] = None, admin_code: Optional[str] = None) -> int:
	out = out or sys.stdout
	# Local comparison only; no server involved
	studio = CurriculumStudio(admin_code=admin_code)
	studio.open_admin()
	studio.set_admin_code(code)
	if studio.submit_admin():
		print("Full page mode unlocked.", file=out)
		return 0
	print(studio.state.error, file=out)
	return 1


async def _generate(topic: str, server: str) -> int:
	async with httpx.AsyncClient(base_url=server, timeout=None) as http:
		return await run_generate(topic, http)


def serve(host: str, port: int) -> None:
	import uvicorn

	uvicorn.run("studio.main:app", host=host, port=port, log_level=settings.log_level.lower())


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="curriculum-studio", description="Generate a curriculum outline for a topic")
	sub = parser.add_subparsers(dest="command", required=True)

	gen = sub.add_parser("generate", help="Request a curriculum for TOPIC")
	gen.add_argument("topic")
	gen.add_argument("--server", default=settings.server_url, help=f"Studio server URL (default: {settings.server_url})")

	unlock = sub.add_parser("unlock", help="Try an admin code against the full page mode gate")
	unlock.add_argument("code")

	srv = sub.add_parser("serve", help="Run the API and static server")
	srv.add_argument("--host", default=settings.host)
	srv.add_argument("--port", type=int, default=settings.port)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	setup_logging()
	if args.command == "generate":
		return asyncio.run(_generate(args.topic, args.server))
	if args.command == "unlock":
		return run_unlock(args.code)
	serve(args.host, args.port)
	return 0
