import logging
import socket

logger = logging.getLogger(__name__)


def resolve_hostname() -> str:
    """Local host name, or an empty string when it cannot be determined."""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.debug("Hostname lookup failed: %s", e)
        return ""
