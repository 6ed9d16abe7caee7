"""
Generation settings with typed, range-checked values.

Key features:
- Inline value definitions for better readability
- Support for boolean, integer and probability settings
- Settings can be excluded from the file string (cosmetic settings)
- Type and range validation on every assignment
"""

from .categories import SettingCategory
from .definitions import (
    BooleanSetting, IntegerSetting, ProbabilitySetting, SettingDefinition, describe_range
)
from .registry import SettingRegistry
from .settings import Settings

__all__ = [
    'SettingCategory',
    'BooleanSetting',
    'IntegerSetting',
    'ProbabilitySetting',
    'SettingDefinition',
    'SettingRegistry',
    'Settings',
    'describe_range',
]
