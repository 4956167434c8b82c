"""
Unit tests for the run-scoped cancellation flag and error slot.
"""

import threading

import pytest

from actionlog.core.exceptions import FileReadError, MalformedLineError
from actionlog.pipeline.state import RunState


class TestRunState:
    """Test cancellation and first-error-wins semantics."""
    
    def test_initial_state(self):
        state = RunState()
        
        assert not state.cancelled
        assert state.error is None
        state.raise_if_failed()
    
    def test_cancel_is_monotonic(self):
        state = RunState()
        
        state.cancel()
        state.cancel()
        
        assert state.cancelled
    
    def test_record_failure_cancels(self):
        state = RunState()
        
        assert state.record_failure(FileReadError("a.log", "boom")) is True
        assert state.cancelled
    
    def test_first_error_wins(self):
        state = RunState()
        first = FileReadError("a.log", "boom")
        second = MalformedLineError({"src": ""})
        
        state.record_failure(first)
        
        assert state.record_failure(second) is False
        assert state.error is first
    
    def test_raise_if_failed(self):
        state = RunState()
        error = FileReadError("a.log", "boom")
        state.record_failure(error)
        
        with pytest.raises(FileReadError) as exc_info:
            state.raise_if_failed()
        
        assert exc_info.value is error
    
    def test_concurrent_failures_keep_exactly_one(self):
        """Test that racing threads store a single error."""
        state = RunState()
        barrier = threading.Barrier(8)
        winners = []
        lock = threading.Lock()
        
        def fail(n):
            barrier.wait()
            won = state.record_failure(FileReadError(f"{n}.log", "boom"))
            if won:
                with lock:
                    winners.append(n)
        
        threads = [threading.Thread(target=fail, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        
        assert len(winners) == 1
        assert state.error.path.name == f"{winners[0]}.log"
