"""
Package settings, read once at import time from a YAML file.

The file shipped with the package is ``settings.yml``; a different file can be supplied through the
``PROBMATH_SETTINGS`` environment variable.
"""
import os
import os.path
import logging
import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = 'PROBMATH_SETTINGS'

DEFAULTS = {
    'error_policy': {
        'domain_error': 'raise'
    }
}


def load_settings(path=None):
    """
    Load settings from a YAML file, filling in anything the file leaves out from DEFAULTS.

    Parameters
    ----------
    path : str, optional
        Path of the settings file. If None (the default), the value of the PROBMATH_SETTINGS environment variable
        is used, or the settings.yml file next to this module if the variable is unset.

    Returns
    -------
    dict
        A nested dictionary of settings
    """
    if path is None:
        path = os.environ.get(SETTINGS_ENV_VAR, os.path.join(os.path.dirname(__file__), 'settings.yml'))

    settings = {k: dict(v) for k, v in DEFAULTS.items()}
    if os.path.exists(path):
        with open(path, 'rt') as f:
            loaded = yaml.safe_load(f.read()) or {}
        for section, values in loaded.items():
            settings.setdefault(section, {}).update(values or {})
        logger.debug("Loaded settings from %s", path)
    else:
        logger.debug("No settings file at %s, using defaults", path)

    return settings


settings = load_settings()
