"""Setting categories for grouping generation settings."""

from enum import IntEnum


class SettingCategory(IntEnum):
    """Categories for organizing settings in help output."""
    CAVE = 1
    WATER = 2
    PLACEMENT = 3
    ITEMS = 4
    MOVEMENT = 5
    COSMETIC = 6  # Settings that don't affect the traversable layout

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the category."""
        names = {
            SettingCategory.CAVE: "Cave Shape",
            SettingCategory.WATER: "Water Clusters",
            SettingCategory.PLACEMENT: "Spawn Placement",
            SettingCategory.ITEMS: "Item Placement",
            SettingCategory.MOVEMENT: "Movement Rules",
            SettingCategory.COSMETIC: "Cosmetic (doesn't affect layout)",
        }
        return names.get(self, "Unknown")

    @property
    def affects_file_string(self) -> bool:
        """Whether settings in this category affect the file string."""
        return self != SettingCategory.COSMETIC
