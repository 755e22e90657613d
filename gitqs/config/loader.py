"""
Configuration loading for gitqs.

Handles loading configuration from ~/.gitqs/config.json with sensible
defaults, then applies the environment variable overrides. The result
is read once at startup; reports only see the FilterContext built from it.
"""

import copy
import json
import os
import shlex
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from gitqs.errors import InvalidArgument
from gitqs.models.filters import FilterContext

DEFAULT_CONFIG: Dict[str, Any] = {
    # Filter window
    "since": None,
    "until": None,
    "pathspec": None,
    "limit": 10,
    "log_options": "",
    "merge_view": "",
    "branch": None,

    # Author for the author-scoped reports when no prompt is possible
    "author": None,

    # JSON export destination
    "json_output": "git-log.json",

    # Reviewer suggestions only look at this many recent commits
    "reviewer_recency_cap": 100,

    "verbose": False,

    # Display options
    "display": {
        "color_enabled": True,
        "bar_divisor": 1.25,
    },
}

# Environment variable -> top-level config key
ENV_OVERRIDES: Dict[str, str] = {
    "_GIT_SINCE": "since",
    "_GIT_UNTIL": "until",
    "_GIT_PATHSPEC": "pathspec",
    "_GIT_LIMIT": "limit",
    "_GIT_LOG_OPTIONS": "log_options",
    "_GIT_MERGE_VIEW": "merge_view",
    "_GIT_BRANCH": "branch",
    "_GIT_AUTHOR": "author",
    "_GIT_JSON_OUTPUT": "json_output",
    "_GIT_REVIEWER_CAP": "reviewer_recency_cap",
}


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get path to config file."""
    environ = os.environ if environ is None else environ
    override = environ.get("GITQS_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gitqs" / "config.json"


def _merge_file(config: Dict[str, Any], config_path: Path) -> None:
    """Merge a user config file into config in place."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Warning: Could not parse config file: {e}")
        return
    except OSError as e:
        print(f"Warning: Error loading config: {e}")
        return

    if not isinstance(user_config, dict):
        print(f"Warning: Ignoring config file {config_path}: expected a JSON object")
        return

    # Shallow merge display section
    if isinstance(user_config.get("display"), dict):
        config["display"].update(user_config["display"])

    # Direct override for simple values
    for key in DEFAULT_CONFIG:
        if key != "display" and key in user_config:
            config[key] = user_config[key]


def _apply_environment(config: Dict[str, Any], environ: Mapping[str, str]) -> None:
    """Apply environment variable overrides to config in place."""
    for env_name, key in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            config[key] = value

    if environ.get("_GIT_BAR_DIVISOR"):
        config["display"]["bar_divisor"] = environ["_GIT_BAR_DIVISOR"]

    theme = environ.get("_MENU_THEME", "").strip().lower()
    if theme == "none" or "NO_COLOR" in environ:
        config["display"]["color_enabled"] = False

    if environ.get("_GIT_DEBUG", "").strip().lower() in ("1", "true", "yes", "on"):
        config["verbose"] = True


def _coerce_numbers(config: Dict[str, Any]) -> None:
    """Convert numeric settings that may arrive as strings."""
    try:
        config["reviewer_recency_cap"] = int(config["reviewer_recency_cap"])
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Invalid reviewer recency cap: {config['reviewer_recency_cap']!r}"
        )
    if config["reviewer_recency_cap"] < 1:
        raise InvalidArgument("Reviewer recency cap must be at least 1")

    try:
        config["display"]["bar_divisor"] = float(config["display"]["bar_divisor"])
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Invalid bar divisor: {config['display']['bar_divisor']!r}"
        )
    if config["display"]["bar_divisor"] <= 0:
        raise InvalidArgument("Bar divisor must be greater than zero")


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load configuration from file and environment, merging with defaults.

    Returns a complete configuration with all default values filled in.
    The config file overrides defaults; environment variables override both.

    Raises:
        InvalidArgument: If a numeric setting cannot be parsed
    """
    environ = os.environ if environ is None else environ
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = get_config_path(environ)
    if config_path.exists():
        _merge_file(config, config_path)

    _apply_environment(config, environ)
    _coerce_numbers(config)
    return config


def build_filter_context(config: Dict[str, Any]) -> FilterContext:
    """
    Build the immutable filter window from a loaded configuration.

    Raises:
        InvalidArgument: If a value fails validation (e.g. limit < 1)
    """
    log_options = config.get("log_options") or ""
    try:
        if isinstance(log_options, str):
            log_options = shlex.split(log_options)
        return FilterContext(
            since=config.get("since"),
            until=config.get("until"),
            pathspec=config.get("pathspec"),
            limit=config.get("limit", 10),
            merge_view=config.get("merge_view") or "",
            branch=config.get("branch"),
            log_options=tuple(log_options),
        )
    except ValueError as e:
        # ValidationError subclasses ValueError; shlex raises plain ValueError
        if isinstance(e, ValidationError):
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first.get("loc", ())) or "config"
            raise InvalidArgument(f"Invalid {field_name}: {first.get('msg')}")
        raise InvalidArgument(f"Invalid log options: {e}")
