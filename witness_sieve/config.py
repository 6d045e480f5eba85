"""
Run configuration.

Responsibility: load and validate the YAML run configuration.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULTS: Dict[str, Any] = {
    'bits': 18,
    'max_range': None,  # overrides bits when set
    'samples': 30,
    'seed': 123,
    'progress_interval': 1000,
    'max_bits': 256,
    'output_dir': 'data/results',
    'plots': True,
}


def _require_int(config: Dict[str, Any], key: str, minimum: int) -> None:
    value = config[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigurationError(f"'{key}' must be an integer >= {minimum}, got {value!r}")


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check every known key; raise ConfigurationError on the first bad value."""
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    _require_int(config, 'bits', 2)
    _require_int(config, 'samples', 1)
    _require_int(config, 'seed', 0)
    _require_int(config, 'progress_interval', 1)
    _require_int(config, 'max_bits', 1)
    if config['max_range'] is not None:
        _require_int(config, 'max_range', 3)
    if resolve_bits(config) > config['max_bits']:
        raise ConfigurationError(
            f"Sieve bound of {resolve_bits(config)} bits exceeds 'max_bits' ({config['max_bits']})"
        )
    if not isinstance(config['plots'], bool):
        raise ConfigurationError(f"'plots' must be true or false, got {config['plots']!r}")
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a YAML config on top of DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. Defaults only when None.

    Returns
    -------
    dict
        Validated configuration.
    """
    config = dict(DEFAULTS)
    if path is not None:
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{path} must contain a mapping, got {type(loaded).__name__}")
        config.update(loaded)
    return validate_config(config)


def resolve_max_range(config: Dict[str, Any]) -> int:
    """Sieve bound: max_range if set, else 2**bits."""
    if config['max_range'] is not None:
        return config['max_range']
    return 2 ** config['bits']


def resolve_bits(config: Dict[str, Any]) -> int:
    """Bit size of the sieve bound, rounded down when it is not a power of two."""
    return resolve_max_range(config).bit_length() - 1
