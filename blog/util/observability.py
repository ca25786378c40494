"""Observability configuration using Logfire.

Services log and trace through logfire directly:

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...

Token material never reaches telemetry: request headers are not captured
and attributes that look like credentials are scrubbed.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names redacted in addition to logfire's defaults
SCRUBBED_ATTRIBUTES = ["authorization", "bearer", "jwt_secret"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when OBSERVABILITY__LOGFIRE_TOKEN is set.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Add route and caller details to FastAPI request spans.

    Only whether a credential was sent is recorded, never the credential.
    """
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    if hasattr(request, "headers"):
        result["has_credentials"] = "authorization" in request.headers
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
