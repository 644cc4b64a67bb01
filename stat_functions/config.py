"""
Package-wide defaults and their YAML overlay.

The defaults hold the values that the worked examples fall back to when a
caller leaves an argument out: the number of values a trimmed mean drops from
each end, the alternative hypothesis of the t-test, and the styling of the
plotting helpers. A YAML file may override any of them.

Examples
--------
>>> from stat_functions import config
>>> config.get_config()["trimmed_mean"]["trim"]
1
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "trimmed_mean": {"trim": 1},
    "t_test": {"alternative": "two-sided"},
    "plot": {
        "n_points": 201,
        "style": {"color": "black", "linewidth": 1.5},
    },
}

_active_config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(base, overlay):
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _check_sections(overlay):
    unknown = sorted(set(overlay) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(
            f"Unknown configuration sections {unknown}. "
            f"Known sections: {sorted(DEFAULT_CONFIG)}"
        )


def load_config(config_path) -> dict[str, Any]:
    """
    Load a YAML configuration file and merge it over the defaults.

    Parameters
    ----------
    config_path : str or pathlib.Path
        Path to the YAML file

    Returns
    -------
    dict
        Defaults with the file's values layered on top

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the file is not a mapping or names an unknown section
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, "r") as f:
        overlay = yaml.safe_load(f) or {}

    if not isinstance(overlay, dict):
        raise ValueError(
            f"Expected a mapping at the top of {config_file}, got {type(overlay).__name__}"
        )

    _check_sections(overlay)

    logger.debug("Loaded configuration overlay from %s", config_file)
    return _merge(DEFAULT_CONFIG, overlay)


def validate_config(config: dict[str, Any], required_fields: list) -> bool:
    """
    Check that every dotted path in ``required_fields`` exists in ``config``.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    required_fields : list of str
        Dotted paths, e.g. ``["plot.style.color", "trimmed_mean.trim"]``

    Returns
    -------
    bool
        True if all fields are present

    Raises
    ------
    ValueError
        If any field is missing
    """
    missing_fields = []

    for field_path in required_fields:
        current = config
        for key in field_path.split("."):
            if not isinstance(current, dict) or key not in current:
                missing_fields.append(field_path)
                break
            current = current[key]

    if missing_fields:
        raise ValueError(f"Configuration missing required fields: {missing_fields}")

    return True


def get_config() -> dict[str, Any]:
    """Return the active configuration."""
    return _active_config


def set_config(config: dict[str, Any]) -> None:
    """
    Replace the active configuration.

    The new configuration is merged over the defaults first, so a partial
    mapping only changes the values it names.

    Raises
    ------
    ValueError
        If ``config`` names an unknown section
    """
    global _active_config
    _check_sections(config)
    merged = _merge(DEFAULT_CONFIG, config)
    validate_config(
        merged, ["trimmed_mean.trim", "t_test.alternative", "plot.n_points", "plot.style"]
    )
    _active_config = merged


def reset_config() -> None:
    """Restore the built-in defaults."""
    global _active_config
    _active_config = copy.deepcopy(DEFAULT_CONFIG)
