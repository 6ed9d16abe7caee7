"""HTTP entry point that serves generated levels as plain JSON data."""
import logging as log
import os
import sys
from typing import Any, Dict, Mapping

from fastapi import FastAPI, HTTPException, Request

# Add parent directory to path to import the generator packages
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from caves.constants import DEFAULT_SEED
from caves.level_builder import GeneratedLevel, LevelBuilder
from settings import (
    BooleanSetting, IntegerSetting, ProbabilitySetting, SettingDefinition, SettingRegistry, Settings,
    describe_range
)
from version import __version__


def level_to_dict(level: GeneratedLevel) -> Dict[str, Any]:
    """Plain data for a presentation layer: rows are listed top row first."""
    return {
        "seed": level.seed,
        "width": level.grid.width,
        "height": level.grid.height,
        "rows": level.grid.ToString().split("\n"),
        "spawn": None if level.spawn is None else {"x": level.spawn.x, "y": level.spawn.y},
        "items": {item.value: {"x": pos.x, "y": pos.y} for item, pos in level.items.items()},
        "completable": level.is_valid,
        "failures": level.failures,
    }


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_setting_value(definition: SettingDefinition, raw: str) -> Any:
    """Convert one query string value to the type its setting expects."""
    if isinstance(definition, BooleanSetting):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Setting '{definition.key}' expects a boolean, got {raw!r}")
    if isinstance(definition, IntegerSetting):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Setting '{definition.key}' expects an integer, got {raw!r}")
    if isinstance(definition, ProbabilitySetting):
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"Setting '{definition.key}' expects a number, got {raw!r}")
    raise ValueError(f"Setting '{definition.key}' cannot be set over HTTP")


def settings_from_query(params: Mapping[str, str]) -> Settings:
    """Build Settings from query parameters named after the registered setting keys.

    Raises:
        ValueError: On unknown keys, unparsable values or out-of-range values
    """
    definitions = SettingRegistry.get_all_settings()
    settings = Settings()
    for key, raw in params.items():
        if key not in definitions:
            raise ValueError(f"Unknown setting '{key}'")
        try:
            settings.set(key, parse_setting_value(definitions[key], raw))
        except TypeError as e:
            raise ValueError(str(e)) from e
    return settings


def create_app() -> FastAPI:
    app = FastAPI(title="Gated Caves", version=__version__)

    def build_level(seed: int, request: Request) -> Dict[str, Any]:
        try:
            settings = settings_from_query(request.query_params)
            level = LevelBuilder(settings, seed).Build()
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

        log.info(f"Served level for seed {seed} ({settings.to_file_string()})")
        return level_to_dict(level)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    @app.get("/settings")
    def list_settings():
        """Every setting accepted as a query parameter by the level routes."""
        return {
            key: {
                "name": definition.display_name,
                "help": definition.help_text,
                "default": definition.get_default(),
                "range": describe_range(definition),
            }
            for key, definition in sorted(SettingRegistry.get_all_settings().items())
        }

    @app.get("/levels/{seed}")
    def generate_level(seed: int, request: Request):
        """Generate a level; any registered setting may be passed as a query parameter."""
        return build_level(seed, request)

    @app.get("/levels")
    def generate_default_level(request: Request):
        return build_level(DEFAULT_SEED, request)

    return app



app = create_app()


if __name__ == "__main__":
    # Configure logging
    log.basicConfig(
        level=log.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    import uvicorn
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
