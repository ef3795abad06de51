import logging

from lesson_planner.core.config import settings

LOG_FORMAT = "%(filename)s:%(lineno)d #%(levelname)-8s [%(asctime)s] - %(name)s - %(message)s"


def setup_logging() -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logging.getLogger("sqlalchemy.engine.Engine").setLevel(logging.WARNING)
