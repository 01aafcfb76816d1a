"""structlog setup for applications embedding the client."""

import logging

import structlog


def configure_logging(*, json_output: bool = True, level: int = logging.INFO) -> None:
    """Install the timestamp + level + renderer processor chain.

    Library modules only call ``structlog.get_logger``; configuring output is
    left to the application, which calls this once at startup.
    """
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
