import getpass

from treefetch.internal.logging import get_logger

logger = get_logger(__name__)


def current_user() -> str:
    try:
        return getpass.getuser()
    except Exception as e:
        logger.debug("Could not resolve current user", error=str(e))
        return "Unknown"
