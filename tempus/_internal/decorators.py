"""Custom decorators for Tempus.

This module provides decorator utilities for the library:
    - @memoize: Memoization decorator with an optional size bound

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, ParamSpec, TypeVar, overload

P = ParamSpec("P")
T = TypeVar("T")


@overload
def memoize(func: Callable[P, T], *, maxsize: int | None = None) -> Callable[P, T]: ...


@overload
def memoize(
    func: None = None, *, maxsize: int | None = None
) -> Callable[[Callable[P, T]], Callable[P, T]]: ...


def memoize(func=None, *, maxsize=None):
    """Memoization decorator for functions with hashable arguments.

    Used bare (``@memoize``) the cache is unbounded. With ``maxsize`` the
    oldest entry is evicted once the cache is full.

    Args:
        func: The function to memoize.
        maxsize: Maximum number of cached results, or None for no limit.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize(maxsize=2)
        ... def square(n: int) -> int:
        ...     return n ** 2
    """
    if maxsize is not None and maxsize < 1:
        raise ValueError(f"maxsize must be positive, got {maxsize}")

    def decorate(fn: Callable[P, T]) -> Callable[P, T]:
        cache: dict[tuple, T] = {}

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            key = (args, tuple(sorted(kwargs.items())))
            if key in cache:
                return cache[key]
            result = fn(*args, **kwargs)
            if maxsize is not None and len(cache) >= maxsize:
                # dicts keep insertion order, so the first key is the oldest
                del cache[next(iter(cache))]
            cache[key] = result
            return result

        # Expose cache for testing/introspection
        wrapper._cache = cache  # type: ignore[attr-defined]
        wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate


__all__ = ["memoize"]
