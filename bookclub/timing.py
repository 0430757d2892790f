# bookclub/timing.py
import functools
import logging
import time
from typing import Any, Callable, TypeVar

from .errors import Outcome

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log entry, duration and failure outcome of a service method."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        name = f"{type(self).__name__}.{func.__name__}"
        logger.debug("Entering %s()", name)
        start = time.perf_counter()
        try:
            result = func(self, *args, **kwargs)
        except Exception as exc:
            elapsed = (time.perf_counter() - start) * 1000
            logger.warning("%s() raised in %.1f ms: %s", name, elapsed, exc)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        if isinstance(result, Outcome) and not result.ok:
            logger.warning(
                "%s() failed in %.1f ms: %s (%s)", name, elapsed, result.message, result.error.value
            )
        else:
            logger.info("%s() executed in %.1f ms", name, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
