"""Logging configuration."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Keep SDK wire logging out of INFO output
    logging.getLogger("urllib3").setLevel(logging.WARNING)
