"""Substitution of environment variables in configuration values."""

import os
import re
from typing import Any

# ${env.NAME} or ${env.NAME:=default}
ENV_VAR_PATTERN = re.compile(r"\$\{env\.([A-Za-z_][A-Za-z0-9_]*)(?::=([^}]*))?\}")


class EnvVarError(ValueError):
    """Referenced environment variable is not set and has no default."""

    def __init__(self, var_name: str, path: str) -> None:
        """Initialize the error with the variable name and configuration path."""
        super().__init__(
            f"Environment variable '{var_name}' not set or empty at {path or '<root>'}"
        )
        self.var_name = var_name
        self.path = path


def replace_env_vars(config: Any, path: str = "") -> Any:
    """Replace ${env.NAME} placeholders in a parsed YAML document.

    Dictionaries and lists are traversed recursively; every string value has
    its placeholders replaced by the value of the environment variable, or by
    the default given after `:=`.

    Parameters:
        config (Any): Parsed configuration (dict, list, or scalar).
        path (str): Dotted path of `config` in the whole document, used in
        error messages.

    Returns:
        Any: The configuration with placeholders replaced.

    Raises:
        EnvVarError: If a referenced variable is unset or empty and the
        placeholder has no default.
    """
    if isinstance(config, dict):
        return {
            key: replace_env_vars(value, f"{path}.{key}" if path else str(key))
            for key, value in config.items()
        }
    if isinstance(config, list):
        return [
            replace_env_vars(value, f"{path}[{index}]")
            for index, value in enumerate(config)
        ]
    if isinstance(config, str):

        def get_env_var(match: re.Match) -> str:
            var_name, default = match.group(1), match.group(2)
            value = os.environ.get(var_name)
            if value:
                return value
            if default is not None:
                return default
            raise EnvVarError(var_name, path)

        return ENV_VAR_PATTERN.sub(get_env_var, config)
    return config
