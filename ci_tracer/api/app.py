"""HTTP application receiving GitLab webhooks."""

import hmac
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from aiohttp import web

from ci_tracer.config import DEFAULT_MAX_BODY_SIZE, InstanceConfig
from ci_tracer.errors import DecodeError, IngestError, InstanceNotFoundError
from ci_tracer.ingesters.gitlab import (
    PIPELINE_HOOK_EVENT,
    GitLabIngester,
    decode_pipeline_hook,
)
from ci_tracer.models.outcome import JobOutcome
from ci_tracer.registry import InstanceRegistry

log = logging.getLogger(__name__)

EVENT_HEADER = "X-Gitlab-Event"
TOKEN_HEADER = "X-Gitlab-Token"


def summarize_outcomes(outcomes: Sequence[JobOutcome]) -> Mapping[str, int]:
    """Count build outcomes by status."""
    return {
        "builds": len(outcomes),
        "traced": sum(1 for o in outcomes if o.status == "traced"),
        "skipped": sum(1 for o in outcomes if o.status == "skipped"),
        "errors": sum(1 for o in outcomes if o.status == "error"),
    }


def has_valid_token(request: web.Request, instance: InstanceConfig) -> bool:
    """Check the webhook secret token when the instance defines one."""
    if instance.token is None:
        return True
    received = request.headers.get(TOKEN_HEADER, "").encode()
    return hmac.compare_digest(received, instance.token.get_secret_value().encode())


@dataclass(frozen=True, kw_only=True)
class GitLabAPI:
    """Webhook endpoint for GitLab instances, one path per instance."""

    ingester: GitLabIngester[Any]
    registry: InstanceRegistry

    def register(self, app: web.Application) -> None:
        """Add the GitLab routes to the application."""
        app.router.add_post("/gitlab/{instance}", self.ingest)

    async def ingest(self, request: web.Request) -> web.Response:
        """Handle a webhook sent by a GitLab instance."""
        name = request.match_info["instance"]
        try:
            instance = self.registry.resolve(name)
        except InstanceNotFoundError:
            log.info("Rejected hook for unknown instance %s", name)
            return web.Response(status=404)

        if not has_valid_token(request, instance):
            log.warning("Rejected hook with invalid token for instance %s", name)
            return web.Response(status=401)

        event = request.headers.get(EVENT_HEADER)
        if event != PIPELINE_HOOK_EVENT:
            log.info("Ignoring unsupported event %r from %s", event, name)
            return web.Response(status=400)

        try:
            hook = decode_pipeline_hook(await request.read())
        except DecodeError as e:
            log.warning("Could not decode hook from %s: %s", name, e)
            return web.json_response({"error": str(e)}, status=400)

        try:
            outcomes = self.ingester.ingest_pipeline(hook, instance)
        except IngestError as e:
            log.error("Could not process hook from %s: %s", name, e)
            return web.Response(status=500)

        return web.json_response(summarize_outcomes(outcomes))


async def health(request: web.Request) -> web.Response:
    """Liveness probe."""
    return web.json_response({"ok": True})


def create_app(
    ingester: GitLabIngester[Any],
    registry: InstanceRegistry,
    *,
    max_body_size: int = DEFAULT_MAX_BODY_SIZE,
) -> web.Application:
    """Create the web application with all routes registered.

    ``max_body_size`` caps the size of webhook bodies, in bytes.
    """
    app = web.Application(client_max_size=max_body_size)
    app.router.add_get("/health", health)
    GitLabAPI(ingester=ingester, registry=registry).register(app)
    return app
