"""Helpers for calling blocking external clients from the event loop."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

from media_relay.domain.errors import (
    MediaRelayError,
    UpstreamDatabaseError,
    UpstreamTimeout,
)

T = TypeVar("T")


async def call_upstream(
    func: Callable[..., T],
    *args: object,
    timeout: float,
    error_type: type[MediaRelayError] = UpstreamDatabaseError,
    **kwargs: object,
) -> T:
    """Run a blocking call in a worker thread, bounded by a timeout.

    Errors from the taxonomy pass through untouched; anything else is
    wrapped in ``error_type``.
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(func, *args, **kwargs), timeout=timeout
        )
    except MediaRelayError:
        raise
    except TimeoutError as exc:
        raise UpstreamTimeout() from exc
    except Exception as exc:
        raise error_type() from exc
