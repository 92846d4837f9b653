"""Compile-once template store for the index page and the count fragment."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fastapi.requests import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import DictLoader, Environment, TemplateSyntaxError, select_autoescape

from htmx_prototype.paths import COUNT_TEMPLATE, INDEX_TEMPLATE

if TYPE_CHECKING:
    from htmx_prototype.counter.state import CounterState


class TemplateParseError(ValueError):
    """Raised when a template source cannot be compiled."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"template {name!r} is invalid: {reason}")
        self.name = name
        self.reason = reason


class TemplateStore:
    """Holds the two compiled templates and renders them into responses.

    Construct through :meth:`build` or :meth:`from_directory`; both compile
    every template eagerly so syntax errors surface before the server starts.
    """

    def __init__(self, templates: Jinja2Templates) -> None:
        self._templates = templates

    @classmethod
    def build(cls, index_source: str, count_source: str) -> "TemplateStore":
        sources = {INDEX_TEMPLATE: index_source, COUNT_TEMPLATE: count_source}
        env = Environment(loader=DictLoader(sources), autoescape=select_autoescape(default=True))
        for name in sources:
            try:
                env.get_template(name)
            except TemplateSyntaxError as exc:
                raise TemplateParseError(name, f"{exc.message} (line {exc.lineno})") from exc
        return cls(Jinja2Templates(env=env))

    @classmethod
    def from_directory(cls, directory: Path) -> "TemplateStore":
        sources: list[str] = []
        for name in (INDEX_TEMPLATE, COUNT_TEMPLATE):
            try:
                sources.append((directory / name).read_text(encoding="utf-8"))
            except OSError as exc:
                raise TemplateParseError(name, f"cannot read {directory / name}: {exc.strerror}") from exc
        return cls.build(*sources)

    def render_index(self, request: Request) -> HTMLResponse:
        return self._templates.TemplateResponse(request, INDEX_TEMPLATE)

    def render_count(self, request: Request, counter: CounterState) -> HTMLResponse:
        return self._templates.TemplateResponse(request, COUNT_TEMPLATE, {"count": counter.value()})
