# tests/test_futures.py
"""
Unit tests for the dispatcher, futures and promises.
"""

import threading
import time

import pytest
from patternbook import Failure, Future, MainDispatcher, Promise, SimpleError, Success
from patternbook.futures import (async_operation, async_operation_2, async_operation_3,
                                 async_operation_4, describe)


class TestMainDispatcher:
    """Test the main-thread-like serial queue."""

    def test_runs_in_submission_order(self, dispatcher):
        """Test that queued callbacks run in order."""
        seen = []
        for i in range(20):
            dispatcher.async_(lambda i=i: seen.append(i))

        assert dispatcher.drain(timeout=5.0)
        assert seen == list(range(20))

    def test_single_worker_thread(self, dispatcher):
        """Test that every callback runs on the same worker thread."""
        threads = set()
        for _ in range(5):
            dispatcher.async_(lambda: threads.add(threading.current_thread().name))

        dispatcher.drain(timeout=5.0)
        assert threads == {"test-dispatcher"}

    def test_after_hops_to_dispatcher(self, dispatcher):
        """Test that delayed callbacks run on the dispatcher."""
        seen = []
        dispatcher.after(0.01, lambda: seen.append(threading.current_thread().name))

        assert dispatcher.drain(timeout=5.0)
        assert seen == ["test-dispatcher"]

    def test_drain_waits_for_nested_scheduling(self, dispatcher):
        """Test that work scheduled from a callback is waited for too."""
        seen = []
        dispatcher.after(0.0, lambda: dispatcher.after(0.01, lambda: seen.append("inner")))

        assert dispatcher.drain(timeout=5.0)
        assert seen == ["inner"]

    def test_drain_timeout(self, dispatcher):
        """Test that drain gives up after the timeout."""
        dispatcher.after(2.0, lambda: None)
        assert dispatcher.drain(timeout=0.05) is False

    def test_callback_error_is_reraised(self, dispatcher):
        """Test that an error inside a callback surfaces on drain."""
        def boom():
            raise RuntimeError("boom")

        dispatcher.async_(boom)
        with pytest.raises(RuntimeError, match="boom"):
            dispatcher.drain(timeout=5.0)

    def test_stop(self):
        """Test start and stop."""
        main = MainDispatcher("stoppable")
        main.start()
        assert main.is_running
        main.stop()
        assert not main.is_running
        assert main.worker_thread is None

    def test_stop_releases_cancelled_timers(self):
        """Test that a restarted dispatcher does not wait on timers cancelled by stop."""
        seen = []
        main = MainDispatcher("restartable")
        main.after(10.0, lambda: seen.append("late"))
        main.stop()

        main.start()
        try:
            assert main.drain(timeout=1.0)
            main.async_(lambda: seen.append("fresh"))
            assert main.drain(timeout=5.0)
        finally:
            main.stop()
        assert seen == ["fresh"]

    def test_stop_releases_unrun_callbacks(self):
        """Test that callbacks still queued at stop no longer count as pending."""
        main = MainDispatcher("blocked")
        started = threading.Event()
        release = threading.Event()
        seen = []

        def block():
            started.set()
            release.wait(5.0)

        main.async_(block)
        for i in range(3):
            main.async_(lambda i=i: seen.append(i))
        assert started.wait(5.0)

        stopper = threading.Thread(target=main.stop)
        stopper.start()
        while main.is_running:
            time.sleep(0.01)
        release.set()
        stopper.join(5.0)

        assert seen == []
        assert main.drain(timeout=1.0)

    def test_errors_are_cleared_after_reraise(self, dispatcher):
        """Test that drain reports the first error once and then starts clean."""
        def fail(message):
            raise RuntimeError(message)

        dispatcher.async_(lambda: fail("first"))
        dispatcher.async_(lambda: fail("second"))
        with pytest.raises(RuntimeError, match="first"):
            dispatcher.drain(timeout=5.0)

        assert dispatcher.errors == []
        assert dispatcher.drain(timeout=5.0)


class TestFuture:
    """Test the single-level future."""

    def test_then_before_result(self):
        """Test that setting the result fires a registered callback."""
        future = Future()
        seen = []
        future.then(seen.append)
        assert seen == []

        future.result = Success(1)
        assert seen == [Success(1)]

    def test_then_after_result(self):
        """Test that a callback registered late fires immediately."""
        future = Future()
        future.result = Success("done")
        seen = []
        future.then(seen.append)
        assert seen == [Success("done")]

    def test_no_result_does_nothing(self):
        """Test that a callback never fires without a result."""
        seen = []
        Future().then(seen.append)
        assert seen == []

    def test_then_replaces_callback(self):
        """Test that only the latest callback is kept."""
        future = Future()
        first, second = [], []
        future.then(first.append)
        future.then(second.append)
        future.result = Success(3)
        assert first == []
        assert second == [Success(3)]

    def test_then_racing_the_result_fires_once(self, dispatcher):
        """Test that a callback registered while the worker settles fires exactly once."""
        fired = []
        promises = []
        for i in range(300):
            promise = Promise()
            dispatcher.after(0.0, lambda promise=promise, i=i: promise.resolve(i))
            promise.then(lambda result, i=i: fired.append(i))
            promises.append(promise)

        assert dispatcher.drain(timeout=10.0)
        assert sorted(fired) == list(range(300))

    def test_promise_resolve_and_reject(self):
        """Test the writable side."""
        resolved, rejected = Promise(), Promise()
        resolved.resolve(5)
        rejected.reject(SimpleError(SimpleError.ERROR_CAUSE_2))

        assert resolved.result == Success(5)
        assert rejected.result == Failure(SimpleError(SimpleError.ERROR_CAUSE_2))
        assert resolved.is_resolved and rejected.is_resolved

    def test_chain_forwards_success(self):
        """Test that chaining feeds the value to the continuation."""
        first = Promise()
        second = Promise()
        seen = []
        first.chain(lambda value: second).then(seen.append)

        first.resolve("a")
        assert seen == []
        second.resolve(len("a"))
        assert seen == [Success(1)]

    def test_chain_forwards_failure_without_calling_continuation(self):
        """Test that a failure skips the continuation."""
        first = Promise()
        called = []
        seen = []

        def continuation(value):
            called.append(value)
            return Promise()

        first.chain(continuation).then(seen.append)
        first.reject(SimpleError(SimpleError.ERROR_CAUSE_1))

        assert called == []
        assert seen == [Failure(SimpleError(SimpleError.ERROR_CAUSE_1))]

    def test_describe(self):
        """Test the result formatting."""
        assert describe(Success(1)) == "success(1)"
        assert describe(Failure(SimpleError(SimpleError.ERROR_CAUSE_1))) == "failure(SimpleError.errorCause1)"


class TestAsyncOperations:
    """Test the delayed operations and the full chain."""

    def test_async_operation_settles_on_dispatcher(self, dispatcher, capsys):
        """Test that the promise settles after the completion message."""
        log = []
        promise = async_operation("op", 0.0, Success("x"), dispatcher, log)
        dispatcher.drain(timeout=5.0)

        assert promise.result == Success("x")
        assert log == ["op completed"]
        assert "op completed" in capsys.readouterr().out

    def test_chain_ends_in_failure(self, dispatcher, fast_config):
        """Test that the three-step chain ends with the fourth operation's error."""
        log = []
        results = []
        (async_operation_2(fast_config, dispatcher, log)
            .chain(lambda text: async_operation_3(text, fast_config, dispatcher, log))
            .chain(lambda value: async_operation_4(value, fast_config, dispatcher, log))
            .then(results.append))
        dispatcher.drain(timeout=5.0)

        assert log == ["asyncOperation2 completed", "asyncOperation3 completed",
                       "asyncOperation4 completed"]
        assert len(results) == 1
        assert isinstance(results[0], Failure)
        assert results[0].error.cause is SimpleError.ERROR_CAUSE_1
