"""
Tests for timing and tolerance utilities in core/compute.
"""

import pytest

from pydescent.core.compute import Timer
from pydescent.core.compute.tolerances import (
    CLOSED_FORM,
    CLOSED_FORM_ILL_CONDITIONED,
    ITERATIVE,
    select_tolerance,
)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('solve'):
            pass
        with timer.section('solve'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'solve'}
        assert result['total_seconds'] >= 0.0
        assert result['solve'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()


class TestTolerances:

    def test_iterative_backends(self):
        assert select_tolerance('cpu_batch_gd') is ITERATIVE
        assert select_tolerance('cpu_sgd') is ITERATIVE

    def test_closed_form(self):
        assert select_tolerance('cpu_normal') is CLOSED_FORM
        assert select_tolerance('cpu_normal', is_ill_conditioned=True) is CLOSED_FORM_ILL_CONDITIONED

    def test_tiers_ordered(self):
        assert CLOSED_FORM.atol < CLOSED_FORM_ILL_CONDITIONED.atol < ITERATIVE.atol
