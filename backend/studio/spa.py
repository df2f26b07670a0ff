from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

ENTRY_DOCUMENT = "index.html"


class SPAStaticFiles(StaticFiles):
	"""Static build output; unknown GET/HEAD paths get the entry document so the client router can take over."""

	async def get_response(self, path: str, scope: Scope) -> Response:
		try:
			return await super().get_response(path, scope)
		except HTTPException as exc:
			if exc.status_code != 404 or scope["method"] not in ("GET", "HEAD"):
				raise
			return await super().get_response(ENTRY_DOCUMENT, scope)
