from fastapi import APIRouter, Depends

from ..settings import Settings, get_settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
	return {"status": "ok", "openai_configured": bool(settings.openai_api_key)}
