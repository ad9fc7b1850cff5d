"""CLI entry point for the CI pipeline tracer."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

from aiohttp import web
from pydantic import ValidationError

from ci_tracer.api.app import create_app
from ci_tracer.config import DEFAULT_MAX_BODY_SIZE, ServiceConfig
from ci_tracer.ingesters.gitlab import GitLabIngester
from ci_tracer.registry import InstanceRegistry
from ci_tracer.tracers.loading import load_tracer_manifest

log = logging.getLogger("ci_tracer")


async def serve(config: ServiceConfig) -> None:
    """Serve webhooks until cancelled, flushing the tracer on the way out."""
    log.info("Loading tracer: %s", config.tracer)
    manifest = load_tracer_manifest(config.tracer)
    tracer_config = manifest.config_cls(**config.tracer_config)

    registry = InstanceRegistry.from_configs(config.instances)
    log.info("Known instances: %s", ", ".join(registry.instances) or "none")

    with manifest.tracer_factory(tracer_config) as tracer:
        app = create_app(
            ingester=GitLabIngester(tracer=tracer),
            registry=registry,
            max_body_size=config.max_body_size,
        )
        runner = web.AppRunner(app)
        await runner.setup()
        try:
            site = web.TCPSite(runner, config.host, config.port)
            await site.start()
            log.info("Listening on %s", config.listen_address)
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()


def parse_config(argv: Sequence[str] | None = None) -> ServiceConfig:
    """Build the service configuration from command line arguments."""
    parser = argparse.ArgumentParser(description="Program to trace CI pipelines")
    parser.add_argument(
        "--listen-address",
        default="127.0.0.1:3000",
        help="Server listening address (host:port)",
    )
    parser.add_argument(
        "--tracer",
        default="otlp",
        help="Tracer backend key (otlp, console)",
    )
    parser.add_argument(
        "--tracer-config",
        default="{}",
        help="JSON configuration for the tracer backend",
    )
    parser.add_argument(
        "--instances",
        default="[]",
        help='JSON list of GitLab instances, e.g. [{"name": "gitlab-com"}]',
    )
    parser.add_argument(
        "--max-body-size",
        type=int,
        default=DEFAULT_MAX_BODY_SIZE,
        help="Largest accepted webhook body, in bytes",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        return ServiceConfig(
            listen_address=args.listen_address,
            tracer=args.tracer,
            tracer_config=json.loads(args.tracer_config),
            instances=json.loads(args.instances),
            max_body_size=args.max_body_size,
        )
    except (json.JSONDecodeError, ValidationError) as e:
        parser.error(f"invalid configuration: {e}")


def main() -> None:
    """CLI entry point."""
    config = parse_config()
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        log.info("Shutting down")


if __name__ == "__main__":  # pragma: no cover
    main()
