import logging

from navroute.config import settings


def setup_logging(level: str | None = None):
    # Configure logging format
    logging_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=logging_format,
        datefmt=date_format,
    )

    # Quiet the per-request lines httpx emits at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
