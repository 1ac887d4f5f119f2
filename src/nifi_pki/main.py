"""
Application entry point — wires adapters into the render pipeline.

Composition root: the only place where concrete adapters are created.

Responsibilities:
  1. Load and validate configuration from the environment
  2. Configure structlog
  3. Create the topology source and the manifest sink
  4. Run the pipeline and turn its Result into an exit code
"""

from __future__ import annotations

import logging
import sys

import structlog
from railway.failure import FailureDescription

from nifi_pki import __version__
from nifi_pki.adapters.manifests import JsonManifestWriter
from nifi_pki.adapters.topology_file import TopologyFile
from nifi_pki.config import AppSettings
from nifi_pki.pipeline import run_pipeline


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console output on stderr.

    stdout is reserved for the manifests when no output file is configured.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _log_failure(error: FailureDescription) -> int:
    log = structlog.get_logger()
    log.error(
        "pipeline.failed",
        code=error.code.value,
        message=error.message,
        cause=str(error.exception) if error.exception else None,
    )
    return 1


def _log_success(count: int) -> int:
    structlog.get_logger().info("pipeline.complete", manifests=count)
    return 0


def run(settings: AppSettings) -> int:
    """Render the manifests described by `settings`; returns the process exit code."""
    source = TopologyFile(settings.topology_path)
    sink = JsonManifestWriter(settings.output_path)
    result = run_pipeline(source, sink, settings.cluster_domain)
    return result.either(on_success=_log_success, on_failure=_log_failure)


def main() -> None:
    """Load settings, configure logging and run the pipeline once."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()
    log.info(
        "app.starting",
        version=__version__,
        topology=str(settings.topology_path),
        output=str(settings.output_path) if settings.output_path else "stdout",
        cluster_domain=settings.cluster_domain,
    )

    sys.exit(run(settings))


if __name__ == "__main__":
    main()
