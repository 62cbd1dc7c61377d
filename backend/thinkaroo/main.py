from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .prompts import PromptCatalog
from .settings import Settings, get_settings
from .routers import health
from .routers import pages

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
	settings = settings or get_settings()

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		# Load prompts once, before the first request is served
		catalog = PromptCatalog.from_directory(settings.prompts_dir)
		app.state.prompts = catalog
		logger.info("Loaded %d prompts: %s", len(catalog), catalog.names())
		yield

	app = FastAPI(title="Thinkaroo API", lifespan=lifespan)
	app.state.settings = settings
	# Empty until lifespan startup runs; apps driven without lifespan keep this
	app.state.prompts = PromptCatalog()
	app.include_router(health.router)
	app.include_router(pages.router)
	return app
