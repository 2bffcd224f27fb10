# cork/core/exceptions.py
# Custom exception hierarchy for Cork (pure - no I/O operations)

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Cork application
class CorkError(Exception):
    pass


# * Lap removal requested w/ an index outside the recorded laps
class LapIndexError(CorkError, IndexError):
    def __init__(self, index: int, lap_count: int):
        self.index = index
        self.lap_count = lap_count
        if lap_count == 0:
            message = f"lap index {index} out of range (no laps recorded)"
        else:
            message = f"lap index {index} out of range (0-{lap_count - 1})"
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(index={self.index!r}, "
            f"lap_count={self.lap_count!r})"
        )


# * Duration or clock time text could not be parsed
class InvalidDurationError(CorkError, ValueError):
    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, text={self.text!r})"


# * Configuration errors
class ConfigurationError(CorkError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError, ValueError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(CorkError):
    pass
