"""One-time deprecation warnings for legacy priority queue names."""

from __future__ import annotations

import functools
import warnings
from typing import Any, Callable, Set, Tuple, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_warned: Set[Tuple[str, str, str, type]] = set()


def warn_once(
    message: str,
    *,
    category: type[Warning] = DeprecationWarning,
    since: str,
    remove_in: str,
    stacklevel: int = 2,
) -> None:
    """Issue ``message`` once per process.

    Parameters
    ----------
    message:
        The deprecation message to emit.
    category:
        Warning type, defaults to :class:`DeprecationWarning`.
    since:
        Version in which the deprecation was introduced.
    remove_in:
        Version in which the deprecated name will be removed.
    stacklevel:
        Passed through to :func:`warnings.warn`.
    """
    key = (message, since, remove_in, category)
    if key in _warned:
        return
    _warned.add(key)
    warnings.warn(
        f"{message} (deprecated since {since}; will be removed in {remove_in})",
        category,
        stacklevel=stacklevel,
    )


def deprecated_alias(new_name: str, *, since: str, remove_in: str) -> Callable[[F], F]:
    """Mark a method as a legacy alias of ``new_name``."""

    def decorate(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            warn_once(
                f"{func.__name__} is deprecated; use {new_name}",
                since=since,
                remove_in=remove_in,
                stacklevel=3,
            )
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorate
