"""
Logging bootstrap
"""
import logging

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_log() -> None:
    """Configure root logging for processes embedding the store"""
    logging.basicConfig(
        level=logging.INFO if not settings.DEBUG else logging.DEBUG,
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info(
        f"{settings.APP_NAME} v{settings.APP_VERSION} logging initialised"
    )
