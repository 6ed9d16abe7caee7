#!/usr/bin/env python3
"""Command-line interface for generating a gated cave level."""

import argparse
import sys
import traceback
from pathlib import Path
import logging
from typing import Optional

# Ensure project root is on the import path when executing from the CLI folder
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from caves.constants import DEFAULT_SEED
from caves.level_builder import GeneratedLevel, LevelBuilder
from settings import (
    BooleanSetting, IntegerSetting, ProbabilitySetting, SettingRegistry, Settings, describe_range
)
from version import __version_display__


def _option_name(key: str) -> str:
    return "--" + key.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a cave level with water, a reachable spawn point and gated items.")
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed value to use when generating the level (default: {DEFAULT_SEED}).")
    parser.add_argument(
        "--retries",
        type=int,
        default=0,
        help="Number of extra seeds (seed+1, seed+2, ...) to try when a level fails (default: 0).")
    parser.add_argument(
        "--show-map",
        action="store_true",
        help="Print the generated grid as text.")
    parser.add_argument( '-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning' )
    parser.add_argument(
        "--version",
        action="version",
        version=f"gated-caves {__version_display__}")

    for category, definitions in sorted(SettingRegistry.get_settings_by_category().items()):
        group = parser.add_argument_group(category.display_name)
        for definition in sorted(definitions, key=lambda d: d.key):
            help_text = f"{definition.help_text} (default: {definition.get_default()})"
            value_range = describe_range(definition)
            if value_range:
                help_text += f" [{value_range}]"
            if isinstance(definition, BooleanSetting):
                group.add_argument(
                    _option_name(definition.key),
                    dest=definition.key,
                    action=argparse.BooleanOptionalAction,
                    default=None,
                    help=help_text)
            elif isinstance(definition, IntegerSetting):
                group.add_argument(
                    _option_name(definition.key), dest=definition.key, type=int, help=help_text)
            elif isinstance(definition, ProbabilitySetting):
                group.add_argument(
                    _option_name(definition.key), dest=definition.key, type=float, help=help_text)

    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Collect settings from parsed arguments, raising ValueError on invalid input."""
    settings = Settings()
    for key in SettingRegistry.get_all_settings():
        value = getattr(args, key, None)
        if value is None:
            continue
        try:
            settings.set(key, value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    is_valid, errors = settings.validate()
    if not is_valid:
        raise ValueError("\n".join(errors))
    return settings


def run_generator(settings: Settings, seed: int, retries: int = 0) -> GeneratedLevel:
    """Build levels for seed, seed+1, ... until one is complete or retries run out.

    Returns the last level built, complete or not.
    """
    if retries < 0:
        raise ValueError("Retries cannot be negative.")

    level = None
    for offset in range(retries + 1):
        level = LevelBuilder(settings, seed + offset).Build()
        if level.IsComplete():
            break
        logging.warning(f"Seed {level.seed} failed ({', '.join(level.failures)})")
    return level


def format_summary(level: GeneratedLevel, settings: Settings) -> str:
    lines = [
        f"Seed: {level.seed}",
        f"Settings: {settings.to_file_string()}",
        f"Grid: {level.grid.width}x{level.grid.height}",
    ]
    if level.spawn is None:
        lines.append("Spawn: not found")
    else:
        lines.append(f"Spawn: ({level.spawn.x}, {level.spawn.y})")
    for item, position in level.items.items():
        lines.append(f"{item.value.capitalize()}: ({position.x}, {position.y})")
    lines.append(f"Completable: {'yes' if level.is_valid else 'no'}")
    if level.failures:
        lines.append(f"Failures: {', '.join(level.failures)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.loglevel.upper())

        settings = build_settings(args)
        level = run_generator(settings, args.seed, args.retries)
    except ValueError as exc:
        parser.error(str(exc))
    except Exception as exc:  # pragma: no cover
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1

    print(format_summary(level, settings))
    if args.show_map:
        print()
        print(level.grid.ToString())
    return 0 if level.spawn is not None else 1


if __name__ == "__main__":
    sys.exit(main())
