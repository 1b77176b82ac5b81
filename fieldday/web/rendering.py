"""Jinja2 rendering of full pages and htmx fragments."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from fieldday.modules.logbook.models import LogEntry

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "base.html"
ENTRY_AREA_TEMPLATE = "entryarea.html"
ROW_TEMPLATE = "log_row.html"
EDIT_ROW_TEMPLATE = "edit_row.html"

HTMX_FILENAME = "htmx.min.js"
HTMX_CDN_URL = "https://unpkg.com/htmx.org@1.9.12"


class TemplateRenderError(Exception):
    """Raised when a template is missing or its context does not bind."""


def build_environment(template_dir: Path) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(["html"]),
        undefined=jinja2.StrictUndefined,
    )


class FragmentRenderer:
    """Renders the page and its swappable fragments.

    Templates are rendered completely before a response object exists, so a
    failure never produces partial HTML.
    """

    def __init__(
        self,
        template_dir: Path,
        modes: Sequence[str],
        htmx_src: str = HTMX_CDN_URL,
    ) -> None:
        self._templates = Jinja2Templates(env=build_environment(template_dir))
        self._modes = tuple(modes)
        self._htmx_src = htmx_src

    @property
    def modes(self) -> tuple[str, ...]:
        return self._modes

    @property
    def htmx_src(self) -> str:
        return self._htmx_src

    def render(
        self,
        request: Request,
        template_name: str,
        context: Mapping[str, Any],
    ) -> HTMLResponse:
        try:
            return self._templates.TemplateResponse(request, template_name, dict(context))
        except jinja2.TemplateError as exc:
            raise TemplateRenderError(f"{template_name}: {exc}") from exc

    def page(self, request: Request, entries: Sequence[LogEntry]) -> HTMLResponse:
        return self.render(
            request,
            PAGE_TEMPLATE,
            {"entries": list(entries), "modes": self._modes, "htmx_src": self._htmx_src},
        )

    def entry_area(self, request: Request, entries: Sequence[LogEntry]) -> HTMLResponse:
        return self.render(
            request, ENTRY_AREA_TEMPLATE, {"entries": list(entries), "modes": self._modes}
        )

    def row(self, request: Request, entry: LogEntry) -> HTMLResponse:
        return self.render(request, ROW_TEMPLATE, {"entry": entry})

    def edit_row(self, request: Request, entry: LogEntry) -> HTMLResponse:
        return self.render(
            request, EDIT_ROW_TEMPLATE, {"entry": entry, "modes": self._modes}
        )
