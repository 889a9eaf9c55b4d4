import time
from functools import wraps
from logging import Logger
from typing import Any, Callable


def log_execution_time(logger: Logger) -> Callable[..., Any]:
    """
    Decorator to log how long a command took to render its query.
    Exceptions raised by the command are logged and then re-raised.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.exception(f"Exception in {func.__name__}: {e}")
                raise
            finally:
                elapsed = time.perf_counter() - start_time
                logger.debug(f"Function {func.__name__} executed in {elapsed:.4f} seconds")

        return wrapper

    return decorator
