"""Configuration loading for the scraper."""

import copy
import logging
import os

import yaml

from ilmeteo_scraper.fetcher import BASE_URL, MAX_RETRIES, REQUEST_TIMEOUT, RETRY_DELAY_BASE, USER_AGENT

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yaml"
HOURLY_EXTRACTOR_NAMES = ('header', 'layout')

DEFAULT_CONFIG = {
    'site': {'base_url': BASE_URL},
    'request': {
        'timeout': REQUEST_TIMEOUT,
        'max_retries': MAX_RETRIES,
        'retry_delay_base': RETRY_DELAY_BASE,
        'user_agent': USER_AGENT,
    },
    'hourly': {'strategy': 'header'},
    'output': {'directory': 'forecasts'},
    'cities': [],
}


def merge_config(base, override):
    """Recursively merges ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config():
    """Returns a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path=CONFIG_FILE):
    """Loads the YAML configuration file over the built-in defaults.

    ``ILMETEO_BASE_URL`` and ``ILMETEO_CITIES`` (comma-separated) in the
    environment take precedence over the file.

    Args:
        config_path (str): The path to the YAML configuration file.

    Returns:
        dict or None: The merged configuration, or None if the file is
        missing or cannot be parsed.
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            file_config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {config_path}")
        return None
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration file {config_path}: {e}")
        return None

    if not isinstance(file_config, dict):
        logger.error(f"Configuration file {config_path} must contain a mapping")
        return None

    config = merge_config(DEFAULT_CONFIG, file_config)

    env_base_url = os.environ.get('ILMETEO_BASE_URL')
    if env_base_url:
        logger.info("Using site base URL from ILMETEO_BASE_URL environment variable.")
        config['site']['base_url'] = env_base_url
    env_cities = os.environ.get('ILMETEO_CITIES')
    if env_cities:
        config['cities'] = [city.strip() for city in env_cities.split(',') if city.strip()]

    strategy = config['hourly'].get('strategy')
    if strategy not in HOURLY_EXTRACTOR_NAMES:
        logger.warning(f"Unknown hourly strategy '{strategy}', using 'header'")
        config['hourly']['strategy'] = 'header'
    return config


def request_options(config):
    """Keyword arguments for :func:`ilmeteo_scraper.fetcher.fetch_document`."""
    request = config['request']
    return {
        'max_retries': request['max_retries'],
        'timeout': request['timeout'],
        'retry_delay_base': request['retry_delay_base'],
        'user_agent': request['user_agent'],
    }
