import pytest
from starlette.requests import Request

from fieldday.core.config import Settings
from fieldday.modules.logbook import MODES, LogEntry
from fieldday.web.rendering import FragmentRenderer, TemplateRenderError


@pytest.fixture
def request_():
    return Request({"type": "http", "method": "GET", "path": "/", "headers": [], "query_string": b""})


@pytest.fixture
def renderer():
    return FragmentRenderer(Settings().template_dir, MODES)


@pytest.fixture
def entry():
    return LogEntry(id=3, callsign="W1AW", time="1200Z", frequency="7.040", mode="CW", notes="")


def test_row_fragment(renderer, request_, entry):
    response = renderer.row(request_, entry)

    body = response.body.decode()
    assert body.lstrip().startswith('<tr id="row-3">')
    assert "<td>7.040</td>" in body


def test_edit_row_offers_every_mode(renderer, request_, entry):
    body = renderer.edit_row(request_, entry).body.decode()

    assert renderer.modes == ("CW", "SSB", "FM", "Digital")
    assert body.count("<option") == 4
    assert '<option value="CW" selected>CW</option>' in body


def test_unknown_template_raises(renderer, request_):
    with pytest.raises(TemplateRenderError):
        renderer.render(request_, "missing.html", {})


def test_unbound_context_raises(renderer, request_):
    with pytest.raises(TemplateRenderError):
        renderer.render(request_, "log_row.html", {})


def test_page_uses_configured_htmx_source(request_):
    renderer = FragmentRenderer(Settings().template_dir, MODES, htmx_src="/static/htmx.min.js")

    body = renderer.page(request_, []).body.decode()

    assert '<script src="/static/htmx.min.js"></script>' in body
