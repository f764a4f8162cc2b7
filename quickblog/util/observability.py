"""Logfire setup for the Post Store and the client.

Spans worth knowing about:
    create_post.execute / update_post.execute (use cases)
    blob_store.set / blob_store.delete (writes)
    client_repository.* / remote_backend.* (client side)

Every HTTP request span carries ``post.id`` or ``post.slug`` when the route
addresses a single post, and ``api.prefix`` for post routes.
"""

from functools import partial
from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.requests import HTTPConnection

from quickblog.config import Settings

SERVICE_NAME = "quickblog"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the machine.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise we send only
    when a token is configured.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process and its client.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        posts_url=settings.api.posts_url,
        client_mode=settings.client.mode,
    )


def post_request_attributes(
    request: HTTPConnection, attributes: dict[str, Any], api_prefix: str
) -> dict[str, Any]:
    """Attach the addressed post and the API prefix to a request span.

    Args:
        request: Incoming request
        attributes: Attributes Logfire collected (validated params, errors)
        api_prefix: Prefix the post routes are mounted under

    Returns:
        Attributes for the request span
    """
    result = {**attributes}

    if request.url.path.startswith(api_prefix):
        result["api.prefix"] = api_prefix

    params = request.path_params
    if "post_id" in params:
        result["post.id"] = params["post_id"]
    elif "slug" in params:
        result["post.slug"] = params["slug"]

    return result


def instrument_fastapi(app: FastAPI, api_prefix: str) -> None:
    """Trace every request to the Post Store.

    Args:
        app: FastAPI application instance
        api_prefix: Prefix the post routes are mounted under
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=partial(post_request_attributes, api_prefix=api_prefix),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace post blob queries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace the client's calls to the Post Store."""
    logfire.instrument_httpx()
