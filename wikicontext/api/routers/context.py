import logging
from typing import Callable, List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from wikicontext.exceptions import NoValidResourcesError
from wikicontext.services.crawl_controller import CrawlController
from wikicontext.services.prompt_builder import build_prompt, summarize

logger = logging.getLogger(__name__)


class ContextRequest(BaseModel):
    seed_urls: List[str]


class PromptRequest(ContextRequest):
    question: str


def _status_events(controller: CrawlController) -> list:
    events = getattr(controller.status_sink, "events", None)
    if events is None:
        return []
    return [{"message": e.message, "severity": e.severity.value} for e in events()]


def create_context_router(controller_factory: Callable[[], CrawlController]):
    """Create the context collection router.

    `controller_factory()` must return a fresh controller per request so runs
    never share crawl state or status history.
    """
    router = APIRouter(prefix="/context", tags=["Context"])

    def _collect(seed_urls: List[str]):
        controller = controller_factory()
        try:
            document = controller.collect_context(seed_urls)
        except NoValidResourcesError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return controller, document

    @router.post("")
    def collect(request: ContextRequest):
        controller, document = _collect(request.seed_urls)
        return {
            "filename": document.filename,
            "stats": summarize(document)._asdict(),
            "status": _status_events(controller),
            "text": document.text,
        }

    @router.post("/download")
    def download(request: ContextRequest):
        _, document = _collect(request.seed_urls)
        return PlainTextResponse(
            document.text,
            headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
        )

    @router.post("/prompt")
    def prompt(request: PromptRequest):
        if not request.question.strip():
            raise HTTPException(status_code=400, detail="Please enter a question")
        controller, document = _collect(request.seed_urls)
        logger.info("Built prompt for %s seed(s), %s KB of context", document.resource_count, document.size_kb)
        return {
            "prompt": build_prompt(request.question, document),
            "stats": summarize(document)._asdict(),
            "status": _status_events(controller),
        }

    return router
