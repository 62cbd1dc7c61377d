from __future__ import annotations
import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response

router = APIRouter(tags=["pages"])

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def _stream_page(request: Request, filename: str) -> Response:
	static_dir: Path = request.app.state.settings.static_dir
	path = static_dir / filename
	if not path.is_file():
		logger.error("Failed to open file %s: not found", path)
		return PlainTextResponse("File not found", status_code=404)
	# FileResponse streams the file in chunks rather than reading it whole
	return FileResponse(path, media_type=HTML_MEDIA_TYPE)


@router.get("/", include_in_schema=False)
async def root_page(request: Request):
	return _stream_page(request, "home.html")


@router.get("/home")
async def home_page(request: Request):
	return _stream_page(request, "home.html")


@router.get("/reading")
async def reading_page(request: Request):
	return _stream_page(request, "reading.html")
