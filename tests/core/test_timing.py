"""
Tests for Timer and timed().
"""

import pytest

from pyols.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('invert'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'invert'}
        assert result['total_seconds'] >= 0.0

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('step'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'step']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


def test_timed_context_manager():
    with timed() as timer:
        pass
    assert timer.result()['total_seconds'] >= 0.0
