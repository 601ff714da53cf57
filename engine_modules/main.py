"""Command-line entry point for resolving the engine module rules."""

from __future__ import annotations

from buildrules.api.logging import get_logger
from buildrules.runtime.config import get_build_config, load_logging_config
from buildrules.runtime.entrypoint import EXIT_RESOLUTION_ERROR, build_parser, run_resolution
from buildrules.runtime.errors import RESOLUTION_ERRORS
from buildrules.runtime.logging import configure_logging, shutdown_logging
from engine_modules.catalog import create_engine_registry

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Resolve the engine module rules for one target."""
    parser = build_parser(description="Resolve engine module rules for a build target.")
    parser.add_argument(
        "--plugin",
        action="append",
        default=[],
        help="Register a module generated from the plugin template (repeatable).",
    )
    args = parser.parse_args(argv)
    # Handlers must exist before the target is read; bad env values log a warning.
    logging_config = load_logging_config()
    configure_logging(logging_config)
    config = get_build_config()
    if config.logging != logging_config:
        configure_logging(config.logging)
    try:
        try:
            registry = create_engine_registry(plugins=args.plugin)
        except (*RESOLUTION_ERRORS, ValueError) as exc:
            logger.error("module_registry_failed error=%s", exc)
            return EXIT_RESOLUTION_ERROR
        return run_resolution(registry, args, config=config)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
