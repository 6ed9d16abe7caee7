"""Setting definition base classes for different value types."""

from typing import Any, Optional

from .categories import SettingCategory


class SettingDefinition:
    """Base class for setting definitions with inline value specifications."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: SettingCategory,
        affects_file_string: bool = None,
        abbreviation: str = None
    ):
        self.key = key
        self.display_name = display_name
        self.help_text = help_text
        self.category = category
        # Allow override, otherwise use category default
        self._affects_file_string = affects_file_string
        self._abbreviation = abbreviation

    @property
    def affects_file_string(self) -> bool:
        """Whether this setting should be included in the file string."""
        if self._affects_file_string is not None:
            return self._affects_file_string
        return self.category.affects_file_string

    @property
    def abbreviation(self) -> str:
        """Short tag used in the file string, the first three letters of the key unless overridden."""
        if self._abbreviation is not None:
            return self._abbreviation
        return self.key[0:3]

    def get_default(self) -> Any:
        """Get the default value for this setting."""
        raise NotImplementedError

    def validate(self, value: Any) -> Any:
        """Validate and convert value if needed. Returns validated value."""
        raise NotImplementedError


class BooleanSetting(SettingDefinition):
    """A simple on/off setting."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: SettingCategory,
        default: bool = False,
        affects_file_string: bool = None,
        abbreviation: str = None
    ):
        super().__init__(key, display_name, help_text, category, affects_file_string, abbreviation)
        self.default = default

    def get_default(self) -> bool:
        return self.default

    def validate(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"Setting '{self.key}' expects boolean, got {type(value).__name__}")
        return value


class IntegerSetting(SettingDefinition):
    """A setting with an integer value and optional range constraints."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: SettingCategory,
        default: int,
        min_value: int = None,
        max_value: int = None,
        affects_file_string: bool = None,
        abbreviation: str = None
    ):
        super().__init__(key, display_name, help_text, category, affects_file_string, abbreviation)
        self.default = default
        self.min_value = min_value
        self.max_value = max_value

        # Validate default is in range
        self.validate(default)

    def get_default(self) -> int:
        return self.default

    def validate(self, value: Any) -> int:
        # bool is a subclass of int but never a meaningful count
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Setting '{self.key}' expects integer, got {type(value).__name__}")

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Setting '{self.key}' value {value} below minimum {self.min_value}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Setting '{self.key}' value {value} above maximum {self.max_value}"
            )
        return value


class ProbabilitySetting(SettingDefinition):
    """A setting holding a probability in the closed range [0, 1]."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: SettingCategory,
        default: float,
        affects_file_string: bool = None,
        abbreviation: str = None
    ):
        super().__init__(key, display_name, help_text, category, affects_file_string, abbreviation)
        self.default = default

        self.validate(default)

    def get_default(self) -> float:
        return self.default

    def validate(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Setting '{self.key}' expects a number, got {type(value).__name__}")

        value = float(value)
        # NaN fails both comparisons, so test for the valid range instead
        if not 0.0 <= value <= 1.0:
            raise ValueError(
                f"Setting '{self.key}' value {value} outside probability range [0, 1]"
            )
        return value


def describe_range(definition: SettingDefinition) -> Optional[str]:
    """Human readable range for help text, or None for unbounded settings."""
    if isinstance(definition, ProbabilitySetting):
        return "0.0-1.0"
    if isinstance(definition, IntegerSetting):
        low = definition.min_value if definition.min_value is not None else ""
        high = definition.max_value if definition.max_value is not None else ""
        if low == "" and high == "":
            return None
        return f"{low}-{high}"
    return None
