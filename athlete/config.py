import yaml

from .errors import ConfigurationError

REQUIRED_KEYS = ('public_key', 'private_key')


def load_config(profile: str, config_file: str = ".config.yaml") -> dict:
    """Load the configuration for a specific profile from the YAML file."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            full_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error loading config {config_file}: {e}") from e

    if not isinstance(full_config, dict) or profile not in full_config:
        raise ConfigurationError(f"Profile '{profile}' not found in {config_file}")

    conf = full_config[profile] or {}
    if not isinstance(conf, dict):
        raise ConfigurationError(f"Profile '{profile}' in {config_file} is not a mapping")

    for key in REQUIRED_KEYS:
        value = conf.get(key)
        if value is None or value == '':
            raise ConfigurationError(f"Missing '{key}' in config for profile '{profile}'")
        # yaml loads all-digit keys as int
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ConfigurationError(f"'{key}' in config for profile '{profile}' must be a string")
        conf[key] = str(value)
    return conf
