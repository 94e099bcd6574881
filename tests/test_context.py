import threading
import time

import pytest

from cloudsigma_client.context import Context
from cloudsigma_client.exceptions import Cancelled, DeadlineExceeded


def test_background_context_is_never_done():
    ctx = Context.background()

    assert ctx.done() is False
    assert ctx.error() is None
    assert ctx.remaining() is None
    ctx.raise_if_done()


def test_cancel_marks_context_done():
    ctx = Context()
    ctx.cancel()

    assert ctx.done() is True
    assert isinstance(ctx.error(), Cancelled)
    with pytest.raises(Cancelled, match="context canceled"):
        ctx.raise_if_done()


def test_expired_deadline_reports_deadline_exceeded():
    ctx = Context(deadline=time.monotonic() - 1)

    assert isinstance(ctx.error(), DeadlineExceeded)
    assert ctx.remaining() == 0.0


def test_timeout_sets_deadline():
    ctx = Context(timeout=30)

    remaining = ctx.remaining()
    assert remaining is not None
    assert 0 < remaining <= 30
    assert ctx.done() is False


def test_timeout_and_deadline_keep_the_earliest():
    deadline = time.monotonic() + 5
    ctx = Context(timeout=60, deadline=deadline)

    assert ctx.deadline == deadline


def test_done_callback_runs_on_cancel():
    ctx = Context()
    calls: list[str] = []

    ctx.add_done_callback(lambda: calls.append("first"))
    ctx.add_done_callback(lambda: calls.append("second"))
    ctx.cancel()
    ctx.cancel()

    assert calls == ["first", "second"]


def test_done_callback_runs_immediately_when_already_done():
    ctx = Context()
    ctx.cancel()
    calls: list[str] = []

    ctx.add_done_callback(lambda: calls.append("late"))

    assert calls == ["late"]


def test_unregistered_done_callback_is_not_run():
    ctx = Context()
    calls: list[str] = []

    unregister = ctx.add_done_callback(lambda: calls.append("removed"))
    unregister()
    ctx.cancel()

    assert calls == []


def test_done_callback_runs_at_deadline():
    ctx = Context(timeout=0.05)
    fired = threading.Event()

    ctx.add_done_callback(fired.set)

    assert fired.wait(2)
    assert isinstance(ctx.error(), DeadlineExceeded)
