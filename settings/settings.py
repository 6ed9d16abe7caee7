"""Settings class for managing generation parameters with validation and serialization."""

import logging as log
from typing import Any, Dict, List, Optional, Tuple

from .definitions import BooleanSetting, IntegerSetting, ProbabilitySetting, SettingDefinition
from .registry import SettingRegistry


class Settings:
    """Container for setting values with validation and serialization."""

    def __init__(self, **overrides: Any):
        # Initialize all settings with their default values
        self._definitions = SettingRegistry.get_all_settings()
        self._values: Dict[str, Any] = {
            key: defn.get_default()
            for key, defn in self._definitions.items()
        }
        for key, value in overrides.items():
            self.set(key, value)

    def __getattr__(self, key: str) -> Any:
        """Access settings as attributes: settings.grid_size"""
        if key.startswith('_'):
            # Allow normal attribute access for private attributes
            return object.__getattribute__(self, key)

        if key in self._values:
            return self._values[key]

        raise AttributeError(f"Setting '{key}' not found")

    def __setattr__(self, key: str, value: Any):
        """Set settings as attributes: settings.grid_size = 50"""
        if key.startswith('_'):
            object.__setattr__(self, key, value)
            return

        self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get setting value with optional default."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set setting value with validation.

        Raises:
            KeyError: If the setting does not exist
            TypeError: If the value has the wrong type
            ValueError: If the value is out of range
        """
        if key not in self._definitions:
            raise KeyError(f"Setting '{key}' not found.")

        definition = self._definitions[key]
        validated_value = definition.validate(value)
        self._values[key] = validated_value

    def get_definition(self, key: str) -> Optional[SettingDefinition]:
        """Get the definition for a setting."""
        return self._definitions.get(key)

    def validate(self) -> Tuple[bool, List[str]]:
        """Check constraints that span more than one setting.

        Single values are already range-checked by set(); this only looks at
        combinations.

        Returns:
            (is_valid, errors) where errors is a list of human readable messages
        """
        errors = []
        total_cells = self.grid_size * self.grid_size
        if self.min_reachable_tiles > total_cells:
            errors.append(
                f"Minimum reachable tiles ({self.min_reachable_tiles}) exceeds the number of "
                f"cells in a {self.grid_size}x{self.grid_size} grid ({total_cells})."
            )
        return len(errors) == 0, errors

    def to_dict(self, include_non_file_string: bool = True) -> Dict[str, Any]:
        """
        Export settings to dictionary.

        Args:
            include_non_file_string: If False, exclude cosmetic settings
        """
        result = {}
        for key, value in self._values.items():
            definition = self._definitions[key]

            if not include_non_file_string and not definition.affects_file_string:
                continue

            result[key] = value

        return result

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Import settings from dictionary."""
        for key, value in data.items():
            try:
                self.set(key, value)
            except (KeyError, TypeError, ValueError) as e:
                # Log warning but continue
                log.warning(f"Failed to set setting '{key}': {e}")

    def to_file_string(self) -> str:
        """
        Generate a compact string representation for filenames and logs.
        Only includes non-default settings that affect the layout.
        """
        parts = []
        for key, value in sorted(self._values.items()):
            definition = self._definitions[key]

            if not definition.affects_file_string:
                continue

            # Skip settings at default value to keep string compact
            if value == definition.get_default():
                continue

            if isinstance(definition, BooleanSetting):
                parts.append(f"{definition.abbreviation}{'Y' if value else 'N'}")
            elif isinstance(definition, ProbabilitySetting):
                parts.append(f"{definition.abbreviation}{round(value * 100)}")
            elif isinstance(definition, IntegerSetting):
                parts.append(f"{definition.abbreviation}{value}")

        return "_".join(parts) if parts else "default"

    def get_all_definitions(self) -> Dict[str, SettingDefinition]:
        """Get all setting definitions."""
        return self._definitions.copy()
