"""
Logging setup shared by the server and the tests.

Request bodies and passwords are never logged; handlers log entity ids only.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Access lines are noise next to the handler logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
