"""
Thread-safe rate-limited logging utilities.

Repeated oracle failures for the same calldata tend to arrive in bursts;
this helper keeps one warning per message and level per interval.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

# Configure logger
logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60

# Keys expire on their own; the lock guards check-and-set
_log_caches = {}
_log_caches_lock = threading.RLock()


def _cache_for(interval: int) -> TTLCache:
    with _log_caches_lock:
        cache = _log_caches.get(interval)
        if cache is None:
            cache = TTLCache(maxsize=256, ttl=interval)
            _log_caches[interval] = cache
        return cache


def rate_limited_log(
    message: str,
    level: str = "warning",
    interval: int = DEFAULT_INTERVAL,
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Log a message with rate limiting, in a thread-safe manner.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        interval: Minimum interval between identical logs in seconds
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was logged, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.warning)
    key = f"{level}:{message}"

    cache = _cache_for(interval)
    with _log_caches_lock:
        if key in cache:
            return False
        cache[key] = True

    log_method(message)
    return True


def reset_rate_limits() -> None:
    """Forget every suppressed message."""
    with _log_caches_lock:
        _log_caches.clear()
