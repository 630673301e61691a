"""FastAPI application."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response

from forum.interface.api.routes import comments, health, interactions, topics
from forum.interface.error import ReactionUnavailableError
from forum.persistence.transaction import Transaction
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi


async def reaction_unavailable_handler(
    request: Request, exc: ReactionUnavailableError
) -> JSONResponse:
    """Render a failed reaction as an unsuccessful result."""
    logfire.error("Reaction unavailable", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"success": False, "error": str(exc)},
    )


async def rollback_on_http_error(request: Request, exc: HTTPException) -> Response:
    """Roll back the request transaction, then render the error as usual.

    Routes turn domain errors into HTTPException, which the request scope
    never sees, so without this the partial writes would be committed.
    """
    container = getattr(request.state, "dishka_container", None)
    if container is not None:
        transaction = await container.get(Transaction)
        await transaction.rollback()
    return await http_exception_handler(request, exc)


def create_app(with_container: bool = True) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        with_container: Attach the production DI container. Tests pass
            False and attach their own container with setup_di.
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Topics, threaded comments and reactions with time-decayed ranking",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_exception_handler(
        ReactionUnavailableError, reaction_unavailable_handler
    )
    app_instance.add_exception_handler(HTTPException, rollback_on_http_error)

    if with_container:
        setup_di(app_instance, create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(topics.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(interactions.router)

    return app_instance
