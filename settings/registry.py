"""Central registry of all generation setting definitions."""

from typing import Dict, List

from .categories import SettingCategory
from .definitions import BooleanSetting, IntegerSetting, ProbabilitySetting, SettingDefinition


class SettingRegistry:
    """Central registry of all setting definitions."""

    # Cave Shape Settings
    GRID_SIZE = IntegerSetting(
        'grid_size',
        'Grid size',
        'Length and height of the square grid, in cells.',
        SettingCategory.CAVE,
        abbreviation='gri',
        default=100,
        min_value=1,
        max_value=1000
    )

    RANDOM_FILL_PERCENT = ProbabilitySetting(
        'random_fill_percent',
        'Initial wall fill',
        'Probability that a cell starts out as a wall in the initial random map.',
        SettingCategory.CAVE,
        abbreviation='fil',
        default=0.5
    )

    SIMULATION_STEPS = IntegerSetting(
        'simulation_steps',
        'Cave smoothing steps',
        'How many cellular automaton steps to run on the cave shape.',
        SettingCategory.CAVE,
        abbreviation='sim',
        default=20,
        min_value=1,
        max_value=1000
    )

    # Water Cluster Settings
    WATER_SEED_PERCENT = ProbabilitySetting(
        'water_seed_percent',
        'Water seed percent',
        'Probability that a floor cell starts out as a water seed.',
        SettingCategory.WATER,
        abbreviation='wse',
        default=0.15
    )

    WATER_SIMULATION_STEPS = IntegerSetting(
        'water_simulation_steps',
        'Water smoothing steps',
        'How many smoothing steps to run on the water map to create clusters.',
        SettingCategory.WATER,
        abbreviation='wst',
        default=3,
        min_value=1,
        max_value=1000
    )

    # Spawn Placement Settings
    MIN_REACHABLE_TILES = IntegerSetting(
        'min_reachable_tiles',
        'Minimum reachable tiles',
        'Minimum number of tiles the player must be able to reach from the spawn point.',
        SettingCategory.PLACEMENT,
        abbreviation='min',
        default=100,
        min_value=1
    )

    MAX_PLACEMENT_TRIES = IntegerSetting(
        'max_placement_tries',
        'Maximum placement attempts',
        'Maximum random samples when looking for a spawn point or an item cell.',
        SettingCategory.PLACEMENT,
        abbreviation='try',
        default=1000,
        min_value=1
    )

    # Item Placement Settings
    PLACE_BOAT = BooleanSetting(
        'place_boat',
        'Place boat',
        'Place a boat on a floor cell next to water. The boat lets the player cross water.',
        SettingCategory.ITEMS,
        abbreviation='boa',
        default=True
    )

    PLACE_GOAT = BooleanSetting(
        'place_goat',
        'Place goat',
        'Place a goat on a floor cell next to a wall or mountain. The goat lets the player climb mountains.',
        SettingCategory.ITEMS,
        abbreviation='goa',
        default=True
    )

    PLACE_PICKAXE = BooleanSetting(
        'place_pickaxe',
        'Place pickaxe',
        'Place a pickaxe on a random floor cell. The pickaxe lets the player climb and dig mountains.',
        SettingCategory.ITEMS,
        abbreviation='pic',
        default=True
    )

    # Movement Settings
    WALLS_ARE_MOUNTAINS = BooleanSetting(
        'walls_are_mountains',
        'Walls are mountains',
        'Treat generated wall cells as mountains, passable with a goat or a pickaxe.',
        SettingCategory.MOVEMENT,
        abbreviation='wal',
        default=False
    )

    # Cosmetic Settings
    RANDOM_WATER_DEPTH = BooleanSetting(
        'random_water_depth',
        'Random water depth',
        'Assign shallow, medium or deep water at random. When off, all water is shallow.',
        SettingCategory.COSMETIC,
        abbreviation='dep',
        default=True
    )

    @classmethod
    def get_all_settings(cls) -> Dict[str, SettingDefinition]:
        """Get all setting definitions as a dictionary."""
        settings = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, SettingDefinition):
                settings[attr.key] = attr
        return settings

    @classmethod
    def get_settings_by_category(cls) -> Dict[SettingCategory, List[SettingDefinition]]:
        """Get settings organized by category."""
        by_category = {}
        for setting in cls.get_all_settings().values():
            if setting.category not in by_category:
                by_category[setting.category] = []
            by_category[setting.category].append(setting)
        return by_category
