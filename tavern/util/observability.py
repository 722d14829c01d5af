"""Logfire setup and instrumentation.

Services and use cases emit spans and events directly, e.g.::

    with logfire.span("invite_to_group", group_id=str(group_id)):
        logfire.info("Group invitations created", invited_users=2)

Invitee email addresses and auth tokens never leave the process: they are
scrubbed from every span and log attribute before export.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tavern.config import ObservabilitySettings, Settings

# Attribute names redacted on top of logfire's default patterns
SCRUB_PATTERNS = [r"\bemail\b", "auth_token", "group_invite"]

# Routes not worth a span per request
EXCLUDED_URLS = ["/health"]


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    turns sending on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API and scripts.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name=settings.observability.service_name,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _group_request_attributes(request: Any, attributes: dict) -> dict:
    """Tag request spans with the group being acted on, if any."""
    result = {**attributes, "method": request.method, "path": request.url.path}
    group_id = request.path_params.get("group_id")
    if group_id:
        result["group_id"] = group_id
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except the excluded routes."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=EXCLUDED_URLS,
        request_attributes_mapper=_group_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries, including the row locks taken while inviting."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to the email provider."""
    logfire.instrument_httpx()
