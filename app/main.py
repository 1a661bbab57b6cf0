from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field, ValidationError

from agent.agent import Assistant, InvalidTeachRequest, build_assistant
from agent.core.prompt import INVALID_TEACH_MESSAGE
from config.settings import Settings, get_settings


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("memo_assistant")


class TeachRequest(BaseModel):
    prompt: Optional[str] = Field(None, description="Prompt to answer in the future")
    response: Optional[str] = Field(None, description="Answer to give for that prompt")


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_teach_body(request: Request) -> TeachRequest:
    """Accept the teach pair as either a JSON object or a form post.

    An unreadable body yields an empty request, which ``teach`` rejects.
    """
    content_type = request.headers.get("content-type", "").lower()
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            data: Any = dict(await request.form())
        else:
            data = await request.json()
        return TeachRequest.model_validate(data)
    except (ValueError, ValidationError) as exc:
        logger.warning("Rejected teach request body: %s", exc)
        return TeachRequest()


def _invalid_teach() -> JSONResponse:
    return JSONResponse(status_code=400, content={"response": INVALID_TEACH_MESSAGE})


def create_app(
    assistant: Optional[Assistant] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="Memo Assistant", version="1.0.0")
    app.state.assistant = assistant or build_assistant(app_settings)

    # CORS: allow a local frontend during development
    if app_settings.app_env.lower() in {"dev", "development", "local"}:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/ai")
    def ask(request: Request, prompt: Optional[str] = None) -> Dict[str, Any]:
        answer = request.app.state.assistant.ask(prompt)
        return {"response": answer.text}

    @app.post("/teach")
    def teach(request: Request, req: TeachRequest = Depends(read_teach_body)):
        try:
            message = request.app.state.assistant.teach(req.prompt, req.response)
        except InvalidTeachRequest:
            return _invalid_teach()
        return {"response": message}

    @app.get("/history")
    def history(request: Request) -> Dict[str, Any]:
        return {"response": request.app.state.assistant.get_history()}

    @app.get("/inspectMemory")
    def inspect_memory(request: Request) -> Dict[str, Any]:
        return {"response": request.app.state.assistant.get_memory()}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Mounted last so the API routes above take precedence.
    if app_settings.static_dir and Path(app_settings.static_dir).is_dir():
        app.mount(
            "/",
            StaticFiles(directory=app_settings.static_dir, html=True),
            name="static",
        )
    else:
        logger.info("Static directory %r not found; UI assets disabled", app_settings.static_dir)

    return app


app = create_app()


def run() -> None:
    logger.info("AI server is running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
