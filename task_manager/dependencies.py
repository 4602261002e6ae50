"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from task_manager.store import TaskStore


def get_store(request: Request) -> TaskStore:
    """Return the store created for this application by create_app()."""
    return request.app.state.store


async def get_raw_body(request: Request) -> bytes:
    """Return the unparsed request body so handlers decide when to validate it."""
    return await request.body()
