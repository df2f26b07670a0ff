import logging

from studio.logger import StudioHandler, setup_logging
from studio.settings import BASE_DIR, Settings


def _clear_env(monkeypatch):
	for name in ("PORT", "HOST", "OPENAI_API_KEY", "ADMIN_CODE", "VITE_ADMIN_CODE", "STATIC_DIR", "OPENAI_TIMEOUT_SECONDS"):
		monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
	_clear_env(monkeypatch)
	s = Settings(_env_file=None)
	assert s.port == 3000
	assert s.openai_api_key is None
	assert s.admin_code == "CURRICULUM2026"
	assert s.static_dir == BASE_DIR / "frontend" / "dist"
	assert s.openai_timeout_seconds == 300


def test_environment_overrides(monkeypatch):
	_clear_env(monkeypatch)
	monkeypatch.setenv("PORT", "8123")
	monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
	monkeypatch.setenv("VITE_ADMIN_CODE", "BUILD-CODE")
	s = Settings(_env_file=None)
	assert s.port == 8123
	assert s.openai_api_key == "sk-live"
	assert s.admin_code == "BUILD-CODE"


def test_setup_logging_is_idempotent():
	setup_logging("DEBUG")
	setup_logging("DEBUG")
	root = logging.getLogger()
	assert sum(isinstance(h, StudioHandler) for h in root.handlers) == 1
	assert logging.getLogger("studio").level == logging.DEBUG
	setup_logging("INFO")
