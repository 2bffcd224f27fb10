# tests/unit/core/test_exceptions.py
# Unit tests for the Cork exception hierarchy

import pytest

from cork.core.exceptions import (
    ConfigurationError,
    CorkError,
    InvalidDurationError,
    JSONParsingError,
    LapIndexError,
    SettingsValidationError,
    format_error_message,
)


# * Verify every error derives from CorkError
@pytest.mark.parametrize(
    "exc",
    [
        LapIndexError(3, 2),
        InvalidDurationError("bad", "x"),
        ConfigurationError("bad config"),
        SettingsValidationError("bad", "tick_interval", 5),
        JSONParsingError("bad json"),
    ],
)
def test_hierarchy(exc):
    assert isinstance(exc, CorkError)


class TestLapIndexError:

    # * Verify it is also an IndexError for callers catching builtins
    def test_is_index_error(self):
        with pytest.raises(IndexError):
            raise LapIndexError(5, 2)

    # * Verify message reports the valid range
    def test_message_with_laps(self):
        err = LapIndexError(5, 2)
        assert str(err) == "lap index 5 out of range (0-1)"
        assert err.index == 5
        assert err.lap_count == 2

    # * Verify message when no laps exist
    def test_message_without_laps(self):
        assert str(LapIndexError(0, 0)) == "lap index 0 out of range (no laps recorded)"

    def test_repr(self):
        assert repr(LapIndexError(1, 0)) == "LapIndexError(index=1, lap_count=0)"


class TestValueErrors:

    # * Verify parse & settings errors are ValueErrors carrying their input
    def test_invalid_duration(self):
        err = InvalidDurationError("Invalid duration 'soon'", "soon")
        assert isinstance(err, ValueError)
        assert err.text == "soon"

    def test_settings_validation(self):
        err = SettingsValidationError("out of range", "refresh_per_second", 0)
        assert isinstance(err, ConfigurationError)
        assert isinstance(err, ValueError)
        assert (err.setting_name, err.value) == ("refresh_per_second", 0)
        assert "refresh_per_second" in repr(err)


# * Verify error message markup
def test_format_error_message():
    assert format_error_message("Error", "boom") == "[red]Error:[/] boom"
