"""
Tests for cancellation tokens and guarded awaits.
"""

import asyncio

import pytest

from jobportal.core.cancellation import CancellationToken, OperationCancelled, run_guarded


async def fetch(value, delay=0):
    await asyncio.sleep(delay)
    return value


async def test_live_token_returns_result():
    token = CancellationToken("view")
    assert await run_guarded(token, fetch("jobs")) == "jobs"


async def test_cancelled_before_await_skips_the_work():
    token = CancellationToken("view")
    token.cancel()

    with pytest.raises(OperationCancelled):
        await run_guarded(token, fetch("jobs"))


async def test_result_resolving_after_cancel_is_discarded():
    token = CancellationToken("view")
    applied = []

    async def load_then_apply():
        applied.append(await run_guarded(token, fetch("stale", delay=0.05)))

    task = asyncio.create_task(load_then_apply())
    await asyncio.sleep(0.01)
    token.cancel()

    with pytest.raises(OperationCancelled):
        await task
    assert applied == []


def test_callbacks_run_once():
    token = CancellationToken()
    calls = []
    token.on_cancel(lambda: calls.append("a"))

    token.cancel()
    token.cancel()

    assert calls == ["a"]
    assert token.cancelled


def test_callback_registered_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel()
    calls = []

    token.on_cancel(lambda: calls.append("late"))

    assert calls == ["late"]


def test_raise_if_cancelled():
    token = CancellationToken("stream")
    token.raise_if_cancelled()
    token.cancel()
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()
