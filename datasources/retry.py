"""
Retry decorator for connector fetches, retrying transient upstream failures with exponential backoff.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, Tuple, Type, TypeVar, cast

from datasources.exceptions import DataSourceUnavailable, QueryTimeout

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TRANSIENT_ERRORS: Tuple[Type[Exception], ...] = (QueryTimeout, DataSourceUnavailable)


def retry(
    *,
    attempts: Optional[int] = None,
    delay: Optional[float] = None,
    backoff: Optional[float] = None,
    exceptions: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS,
) -> Callable[[F], F]:
    """Retry the wrapped callable when it raises one of ``exceptions``.

    Unset knobs fall back to ``settings.retry_*`` at call time, so tests can
    shorten delays with ``monkeypatch``. The last failure is re-raised once
    the attempts are exhausted.
    """

    def _knobs() -> Tuple[int, float, float]:
        from config import settings

        return (
            attempts if attempts is not None else settings.retry_attempts,
            delay if delay is not None else settings.retry_delay_seconds,
            backoff if backoff is not None else settings.retry_backoff,
        )

    def decorator(func: F) -> F:
        name = getattr(func, "__qualname__", repr(func))

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                max_attempts, wait, factor = _knobs()
                attempt = 0
                while True:
                    try:
                        return await func(*args, **kwargs)
                    except exceptions as exc:
                        attempt += 1
                        if attempt >= max_attempts:
                            raise
                        log.warning("%s failed (attempt %d/%d): %s", name, attempt, max_attempts, exc)
                        await asyncio.sleep(wait)
                        wait *= factor

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            max_attempts, wait, factor = _knobs()
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    attempt += 1
                    if attempt >= max_attempts:
                        raise
                    log.warning("%s failed (attempt %d/%d): %s", name, attempt, max_attempts, exc)
                    time.sleep(wait)
                    wait *= factor

        return cast(F, sync_wrapper)

    return decorator
