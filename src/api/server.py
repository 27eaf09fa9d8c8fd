# src/api/server.py
from __future__ import annotations
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from config.settings import API_HOST, API_PORT, CORS_ORIGINS, STATIC_DIR
from src.engine.lifecycle import LoadingState, ReadyState
from src.engine.pipeline import answer_query

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


def create_app(state: Optional[ReadyState] = None, static_dir: Optional[str] = STATIC_DIR) -> FastAPI:
    """
    HTTP adapter around answer_query.
    Pass `state` to skip loading CSVs (tests); otherwise data loads at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "engine", None) is None:
            app.state.engine = LoadingState().load()
        yield

    app = FastAPI(title="Gridiron Scout API", version="0.1.0", lifespan=lifespan)
    app.state.engine = state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"response": "Internal server error."})

    @app.post("/api/chat", response_model=ChatResponse)
    def chat(body: ChatRequest, request: Request):
        result = answer_query(request.app.state.engine, body.message or "")
        if result.status == "empty_query":
            return JSONResponse(status_code=400, content={"response": result.text})
        return ChatResponse(response=result.text)

    # Mounted last so /api routes take precedence
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


if __name__ == "__main__":
    import uvicorn
    from src.utils.logging_setup import configure_logging

    configure_logging()
    uvicorn.run(create_app(), host=API_HOST, port=API_PORT)
