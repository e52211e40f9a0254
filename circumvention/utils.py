"""Utility functions for the circumvention monitor."""

import logging
from urllib.parse import urlparse


def setup_logging(verbose: bool = False) -> None:
    """Send monitor log records to stderr.

    Args:
        verbose: Also show per-response debug lines
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # crawler adapters pull in httpx; keep its request lines out of the run log
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.setLevel(level)


logger = logging.getLogger("circumvention")


def sanitize_url(url: str) -> str:
    """Sanitize URL for logging (remove credentials)."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            netloc = f"{parsed.username}:****@{parsed.hostname}"
            if parsed.port:
                netloc = f"{netloc}:{parsed.port}"
            return parsed._replace(netloc=netloc).geturl()
        return url
    except ValueError:
        return url
