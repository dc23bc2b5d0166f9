import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import RedirectResponse

from .db import Base, engine
from . import models  # noqa: F401  registers Question with Base
from .embeddings import VectorEngine
from .settings import settings
from .routers import health, interview

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("interview-coach")


def create_app() -> FastAPI:
	app = FastAPI(title="Interview Coach API")

	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.cors_origins,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	app.include_router(health.router)
	app.include_router(interview.router)

	# Built frontend at /app, only when one has been provided
	if settings.frontend_dir and Path(settings.frontend_dir).is_dir():
		app.mount("/app", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")

		@app.get("/", include_in_schema=False)
		async def redirect_root_to_app():
			return RedirectResponse(url="/app")

	@app.get("/info")
	def root():
		return {
			"status": "ok",
			"inference_configured": bool(settings.hf_api_key),
			"models": settings.hf_models,
			"embedding_model": settings.embedding_model,
		}

	@app.on_event("startup")
	async def startup_event():
		# Initialize DB schema
		Base.metadata.create_all(bind=engine)
		if settings.preload_embedding_model:
			VectorEngine.get_instance()
		logger.info(f"[startup] models={settings.hf_models} embedding_model={settings.embedding_model}")

	return app


app = create_app()


def run() -> None:
	import uvicorn

	uvicorn.run("interview_coach.main:app", host=settings.host, port=settings.port)
