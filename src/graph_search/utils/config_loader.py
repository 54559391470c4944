"""
YAML configuration file loader for graph search.

This module provides utilities to load and validate YAML configuration files
for the search algorithm and to set up logging from them.
"""

import copy
import logging
import yaml
from typing import Dict, Any
from pathlib import Path


DEFAULT_CONFIG: Dict[str, Any] = {
    'name': 'astar',
    'parameters': {
        'heuristic_type': 'euclidean',
    },
    'logging': {
        'level': 'INFO',
        'log_events': False,
    },
}


def load_yaml_config(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If file is not valid YAML

    Example:
        >>> config = load_yaml_config('configs/search.yaml')
        >>> print(config['algorithm']['parameters'])
        {'heuristic_type': 'euclidean'}
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        try:
            config = yaml.safe_load(f)
            return config if config is not None else {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {filepath}: {e}")


def load_search_config(config_dir: str = 'configs', filename: str = 'search.yaml') -> Dict[str, Any]:
    """
    Load the search algorithm configuration.

    Args:
        config_dir: Directory containing config files (default: 'configs')
        filename: Config file name inside config_dir (default: 'search.yaml')

    Returns:
        The 'algorithm' section, with defaults filled in for missing keys

    Example:
        >>> search_config = load_search_config()
        >>> search_config['parameters']['heuristic_type']
        'euclidean'
    """
    config_path = Path(config_dir) / filename
    config = load_yaml_config(str(config_path))
    return merge_configs(DEFAULT_CONFIG, config.get('algorithm') or {})


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.

    Later dictionaries override earlier ones for conflicting keys. Nested
    sections are merged key by key instead of being replaced, and an empty
    section (loaded from YAML as None) keeps the earlier value.

    Args:
        *configs: Variable number of configuration dictionaries

    Returns:
        Merged configuration dictionary

    Example:
        >>> base_config = {'a': 1, 'b': {'x': 1, 'y': 2}}
        >>> override_config = {'b': {'y': 3}, 'c': 4}
        >>> merge_configs(base_config, override_config)
        {'a': 1, 'b': {'x': 1, 'y': 3}, 'c': 4}
    """
    merged: Dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if value is None and key in merged:
                continue
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = merge_configs(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
    return merged


def get_search_params(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract search parameters from an 'algorithm' configuration section.

    Args:
        config: Algorithm configuration dictionary (may be partial)

    Returns:
        Dictionary with 'method', 'heuristic_type' and 'log_events'
    """
    config = merge_configs(DEFAULT_CONFIG, config)
    return {
        'method': config['name'],
        'heuristic_type': config['parameters']['heuristic_type'],
        'log_events': bool(config['logging']['log_events']),
    }


def configure_logging(config: Dict[str, Any]) -> None:
    """
    Set up root logging from the 'logging' part of a search configuration.

    Args:
        config: Algorithm configuration dictionary
    """
    level = logging.getLevelName(str(merge_configs(DEFAULT_CONFIG, config)['logging']['level']).upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
