from fastapi import Request

from filestore_api.adapters.storage import BaseStorage


def get_storage(request: Request) -> BaseStorage:
    """Storage dependency. The handler is built once by the app factory."""
    return request.app.state.storage
