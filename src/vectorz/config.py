"""
Vectorz Configuration
=====================
Numeric tolerances used by the comparison and normalisation operations.
Single source of truth; every operation reads its default from here.

Usage:
    from vectorz.config import CONFIG, get
    eps = get('tolerance.approx_equal')

Overrides come from a YAML file with the same nesting:

    tolerance:
      approx_equal: 1.0e-9

    vectorz.config.load('tolerances.yaml')
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


_DEFAULTS = {

    # =================================================================
    # Tolerances
    # =================================================================
    'tolerance': {
        # Default epsilon for approx_equal(a, b)
        'approx_equal': 1e-7,
        # |magnitude - 1| allowed by is_normalised(v)
        'unit_length': 1e-7,
        # Magnitudes at or below this cannot be normalised
        'zero_magnitude': 0.0,
    },
}

CONFIG: Dict[str, Any] = copy.deepcopy(_DEFAULTS)


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('tolerance.approx_equal')  → 1e-7
        get('no.such.key', 0)          → 0
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def load(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Merge a YAML override file into CONFIG and return CONFIG.

    Nested mappings merge key by key; scalars replace.
    """
    path = Path(path)
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(cfg).__name__}")
    _merge(CONFIG, cfg)
    logger.info("Loaded vectorz config overrides from %s", path)
    return CONFIG


def reset() -> None:
    """Restore built-in defaults."""
    CONFIG.clear()
    CONFIG.update(copy.deepcopy(_DEFAULTS))
