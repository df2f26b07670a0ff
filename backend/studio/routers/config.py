from fastapi import APIRouter, Depends

from ..settings import Settings, get_settings

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/config")
def client_config(settings: Settings = Depends(get_settings)):
	# Client-visible build configuration; the admin code is a cosmetic gate, not a secret
	return {"adminCode": settings.admin_code}
