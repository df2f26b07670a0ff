import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StudioHandler(logging.StreamHandler):
	"""Marker type so repeated setup (reloads, tests) does not stack handlers."""


def setup_logging(level: str | None = None) -> None:
	level = (level or settings.log_level).upper()
	handler = StudioHandler()
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	# Configure root logger
	root_logger = logging.getLogger()
	root_logger.setLevel(level)
	if not any(isinstance(h, StudioHandler) for h in root_logger.handlers):
		root_logger.addHandler(handler)

	# uvicorn installs its own handlers; only align levels here
	for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "studio"]:
		logging.getLogger(logger_name).setLevel(level)

	# Outbound request lines from httpx are noise at INFO
	logging.getLogger("httpx").setLevel(logging.WARNING)
