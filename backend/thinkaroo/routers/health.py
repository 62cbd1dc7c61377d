from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
	"""Liveness check for supervisors and load balancers. Always ``OK``."""
	return "OK"
