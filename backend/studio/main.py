from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from .errors import ProxyError, proxy_error_handler
from .logger import setup_logging
from .routers import chat, config, health
from .settings import settings
from .spa import ENTRY_DOCUMENT, SPAStaticFiles

logger = logging.getLogger(__name__)


def create_app(static_dir: Optional[Path] = None) -> FastAPI:
	static_dir = Path(static_dir or settings.static_dir)
	app = FastAPI(title="Curriculum Studio API")
	app.add_exception_handler(ProxyError, proxy_error_handler)
	app.include_router(chat.router)
	app.include_router(config.router)
	app.include_router(health.router)

	if not static_dir.is_dir():
		# API stays up; every non-API path is a plain 404 until the build exists
		logger.warning("Static directory %s does not exist; serving the API only", static_dir)
		return app
	if not (static_dir / ENTRY_DOCUMENT).is_file():
		logger.warning("No %s under %s; unmatched pages will 404", ENTRY_DOCUMENT, static_dir)

	# Mounted last so API routes win
	app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="frontend")
	return app


setup_logging()
app = create_app()
