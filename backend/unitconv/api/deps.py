from fastapi import Request

from unitconv.core.registry import Registry


def get_registry(request: Request) -> Registry:
    """The registry built once at application startup."""
    return request.app.state.registry
