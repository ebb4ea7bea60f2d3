"""Concurrency helpers for controlling background thread usage."""

from __future__ import annotations

from typing import Any, Callable

import anyio

from app.core.config import settings

_upload_sem = anyio.Semaphore(settings.ASSET_MAX_CONCURRENCY)


async def run_in_thread_limited(func: Callable[..., Any], *args: Any):
    """Run a sync callable in a worker thread with bounded concurrency.

    The caller may cancel (for instance through ``anyio.fail_after``); the
    thread is then abandoned and left to finish on its own.
    """

    async with _upload_sem:
        return await anyio.to_thread.run_sync(func, *args, abandon_on_cancel=True)
