"""Access to the application container attached at startup."""

from fastapi import Request

from fieldday.core.container import ApplicationContainer
from fieldday.web.rendering import FragmentRenderer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_renderer(request: Request) -> FragmentRenderer:
    return get_container(request).renderer


__all__ = ["get_container", "get_renderer"]
