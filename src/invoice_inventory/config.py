"""
Configuration loading
Reads config/inventory_config.yaml, falling back to built-in defaults
"""

import copy
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "inventory_config.yaml"


def default_config() -> Dict:
    """Return default configuration"""
    return {
        'inventory': {
            'action': 'add',
            'unknown_product_name': 'Unknown Product',
            'default_unit': 'each',
            'sku_placeholder': 'item',
            'sku_suffix': 'clock',
        },
        'workflow': {
            'allowed_extensions': ['.pdf', '.jpg', '.jpeg', '.png'],
            'target_language': 'en',
            'translate': True,
        },
        'logging': {
            'level': 'INFO',
            'file': 'logs/invoice_inventory.log',
        },
    }


def _merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to a YAML file (default: config/inventory_config.yaml)

    Returns:
        Configuration dict; missing keys are filled from the defaults
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return default_config()

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return _merge(default_config(), loaded)
