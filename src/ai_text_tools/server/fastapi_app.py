"""FastAPI server for the text tools.

Endpoints:
- GET /            browser UI
- /health       any method
- POST /summarize, /keywords, /rewrite, /questions, /titles, /expand
"""
from __future__ import annotations
import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, ValidationError

from ai_text_tools.common.config import Settings, load_settings
from ai_text_tools.common.llm_client import ChatCompletionClient, LLMError
from ai_text_tools.common.schema import (
    ExpandResponse,
    KeywordsResponse,
    QuestionsResponse,
    RewriteRequest,
    RewriteResponse,
    SummarizeResponse,
    TextRequest,
    TitlesResponse,
)
from ai_text_tools.common.tasks import Completer, run_task

LOGGER = logging.getLogger("ai_text_tools.server")

INDEX_HTML = Path(__file__).resolve().parent.parent / "static" / "index.html"


def get_llm_client(request: Request) -> Completer:
    """Retrieve the shared completion client from app state."""
    return request.app.state.llm_client


def json_body(model: type[BaseModel]):
    """
    Dependency that decodes the raw request body as JSON into `model`.

    The Content-Type header is ignored, so `curl -d '{"text": ...}'` works
    even though curl labels it as a form post.
    """
    async def dependency(request: Request) -> BaseModel:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e
    return dependency


def _run(client: Completer, task: str, text: str, tone: str | None = None) -> dict:
    try:
        return run_task(client, task, text, tone)
    except LLMError as e:
        LOGGER.error("%s error: %s", task, e)
        raise HTTPException(status_code=500, detail="LLM error")


async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and missing text as 400 rather than 422."""
    # Errors located at the document root mean the body is not a JSON object.
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" or not tuple(e.get("loc", ())) for e in errors):
        detail = "invalid JSON body"
    else:
        detail = "`text` is required"
    LOGGER.info("rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


def create_app(settings: Settings | None = None, llm_client: Completer | None = None) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings: Process settings; loaded from the environment when omitted.
        llm_client: Completion client; built from settings when omitted.
    """
    if llm_client is None:
        settings = settings or load_settings()
        llm_client = ChatCompletionClient(settings)

    app = FastAPI(title="AI Text Tools", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.llm_client = llm_client
    app.add_exception_handler(RequestValidationError, _bad_request)

    text_body = json_body(TextRequest)
    rewrite_body = json_body(RewriteRequest)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        LOGGER.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def index() -> HTMLResponse:
        return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))

    @app.api_route("/", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    def index_other_methods() -> None:
        raise HTTPException(status_code=404, detail="Not Found")

    @app.api_route("/health", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/summarize", response_model=SummarizeResponse)
    def summarize(body: TextRequest = Depends(text_body), client: Completer = Depends(get_llm_client)) -> SummarizeResponse:
        return SummarizeResponse(**_run(client, "summarize", body.text))

    @app.post("/keywords", response_model=KeywordsResponse)
    def keywords(body: TextRequest = Depends(text_body), client: Completer = Depends(get_llm_client)) -> KeywordsResponse:
        return KeywordsResponse(**_run(client, "keywords", body.text))

    @app.post("/rewrite", response_model=RewriteResponse)
    def rewrite(body: RewriteRequest = Depends(rewrite_body), client: Completer = Depends(get_llm_client)) -> RewriteResponse:
        return RewriteResponse(**_run(client, "rewrite", body.text, body.effective_tone))

    @app.post("/questions", response_model=QuestionsResponse)
    def questions(body: TextRequest = Depends(text_body), client: Completer = Depends(get_llm_client)) -> QuestionsResponse:
        return QuestionsResponse(**_run(client, "questions", body.text))

    @app.post("/titles", response_model=TitlesResponse)
    def titles(body: TextRequest = Depends(text_body), client: Completer = Depends(get_llm_client)) -> TitlesResponse:
        return TitlesResponse(**_run(client, "titles", body.text))

    @app.post("/expand", response_model=ExpandResponse)
    def expand(body: TextRequest = Depends(text_body), client: Completer = Depends(get_llm_client)) -> ExpandResponse:
        return ExpandResponse(**_run(client, "expand", body.text))

    return app
