import logging
import sys
from pythonjsonlogger import jsonlogger
from devops_demo.core.config import settings


def setup_logging(level: str | None = None):
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    # create_app() may run more than once per process (tests)
    if any(getattr(h, "_devops_demo", False) for h in root_logger.handlers):
        return

    log_handler = logging.StreamHandler(sys.stdout)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    log_handler.setFormatter(formatter)
    log_handler._devops_demo = True

    root_logger.addHandler(log_handler)
