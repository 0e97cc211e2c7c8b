"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyols import __version__
from pyols.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_gauss_jordan",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "normal_equations"},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "normal_equations"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_jordan"

    def test_timing_none(self):
        assert _result().timing is None


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        provenance = _result().provenance
        assert provenance["pyols_version"] == __version__
        assert "numpy_version" in provenance
        assert "python_version" in provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("Saturated fit: 2 observations",))
        assert result.has_warning("Saturated")
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


class TestImmutability:

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)
