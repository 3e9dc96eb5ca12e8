from functools import wraps
from typing import Callable

_sentinel = object()


def run_once(func: Callable) -> Callable:
    """
    Cache the first result of ``func`` and hand it back on every later call, whatever the arguments.

    Used for lookups that must hit the provider a single time per program run (the sysenv VPC, for one).

    :param func: The decorated function
    """
    result = _sentinel

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal result

        if result is _sentinel:
            result = func(*args, **kwargs)

        return result

    return wrapper
