"""Logbook page and htmx fragment endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from fieldday.interfaces.http.deps import (
    get_entry_input,
    get_logbook_service,
    get_renderer,
    parse_entry_id,
    read_form,
)
from fieldday.modules.logbook import LogbookService, LogEntry, LogEntryInput, LogEntryNotFoundError
from fieldday.web.rendering import FragmentRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_entry(service: LogbookService, raw_id: str | None) -> LogEntry:
    entry_id = parse_entry_id(raw_id)
    if entry_id is None:
        logger.info("Rejected entry id %r", raw_id)
        raise HTTPException(status_code=404, detail="Not found")
    try:
        return await service.get_entry(entry_id)
    except LogEntryNotFoundError:
        logger.info("No log entry with id %s", entry_id)
        raise HTTPException(status_code=404, detail="Not found")


@router.get("/", response_class=HTMLResponse, summary="Logbook page")
async def index(
    request: Request,
    service: LogbookService = Depends(get_logbook_service),
    renderer: FragmentRenderer = Depends(get_renderer),
):
    entries = await service.list_entries()
    return renderer.page(request, entries)


@router.post("/add", response_class=HTMLResponse, summary="Log a new contact")
async def add_entry(
    request: Request,
    payload: LogEntryInput = Depends(get_entry_input),
    service: LogbookService = Depends(get_logbook_service),
    renderer: FragmentRenderer = Depends(get_renderer),
):
    await service.create_entry(payload)
    entries = await service.list_entries()
    return renderer.entry_area(request, entries)


@router.get("/edit", response_class=HTMLResponse, summary="Editable row")
async def edit_entry(
    request: Request,
    id: str | None = None,
    service: LogbookService = Depends(get_logbook_service),
    renderer: FragmentRenderer = Depends(get_renderer),
):
    entry = await _load_entry(service, id)
    return renderer.edit_row(request, entry)


@router.post("/update", response_class=HTMLResponse, summary="Save an edited row")
async def update_entry(
    request: Request,
    form: dict[str, str] = Depends(read_form),
    payload: LogEntryInput = Depends(get_entry_input),
    service: LogbookService = Depends(get_logbook_service),
    renderer: FragmentRenderer = Depends(get_renderer),
):
    entry_id = parse_entry_id(form["id"])
    if entry_id is not None:
        await service.update_entry(entry_id, payload)
    entry = await _load_entry(service, form["id"])
    return renderer.row(request, entry)


@router.get("/logs/row", response_class=HTMLResponse, summary="Display row")
async def show_row(
    request: Request,
    id: str | None = None,
    service: LogbookService = Depends(get_logbook_service),
    renderer: FragmentRenderer = Depends(get_renderer),
):
    entry = await _load_entry(service, id)
    return renderer.row(request, entry)
