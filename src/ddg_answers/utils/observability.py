"""Call timing for client operations."""

import inspect
import functools
import logging
import time

logger = logging.getLogger(__name__)


def timed(func=None, *, level=logging.DEBUG):
    """Decorator that logs function execution time.

    Usage:
        @timed
        def execute(self): ...

        @timed(level=logging.INFO)
        async def aexecute(self): ...

    Logs: module.function took Xms
    """
    def decorator(fn):
        name = f"{fn.__module__}.{fn.__qualname__}"

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                start = time.perf_counter()
                try:
                    return await fn(*args, **kwargs)
                finally:
                    elapsed_ms = (time.perf_counter() - start) * 1000
                    logger.log(level, f"{name} took {elapsed_ms:.0f}ms")
            return async_wrapper

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                logger.log(level, f"{name} took {elapsed_ms:.0f}ms")
        return sync_wrapper

    if func is not None:
        return decorator(func)
    return decorator
