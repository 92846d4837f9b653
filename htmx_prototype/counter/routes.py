"""Counter routes: index page, increment action, and count fragment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from htmx_prototype.counter.state import CounterState
from htmx_prototype.templating import TemplateStore

INCREMENTED_EVENT = "incremented"

router = APIRouter()


def get_templates(request: Request) -> TemplateStore:
    templates: TemplateStore | None = getattr(request.app.state, "templates", None)
    if templates is None:
        raise RuntimeError("Template store not configured on application state")
    return templates


def get_counter(request: Request) -> CounterState:
    counter: CounterState | None = getattr(request.app.state, "counter", None)
    if counter is None:
        raise RuntimeError("Counter not configured on application state")
    return counter


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, templates: TemplateStore = Depends(get_templates)) -> HTMLResponse:
    """Render the full page; the count region loads itself via htmx."""

    return templates.render_index(request)


@router.post("/increment")
async def increment(counter: CounterState = Depends(get_counter)) -> Response:
    """Bump the counter and tell the client to refresh the count fragment."""

    counter.increment()
    return Response(status_code=200, headers={"HX-Trigger": INCREMENTED_EVENT})


@router.get("/count", response_class=HTMLResponse)
async def count(
    request: Request,
    templates: TemplateStore = Depends(get_templates),
    counter: CounterState = Depends(get_counter),
) -> HTMLResponse:
    """Return the count fragment (htmx partial)."""

    return templates.render_count(request, counter)
