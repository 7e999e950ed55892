# Area: Config
"""
oracle_command.config - Oracle server configuration
===================================================

Loads, validates, and exposes the endpoints and per-network overrides
needed to invoke the oracle server.

Configuration precedence for ``load_config``:
1. Values in the JSON config file (if given).
2. Values from the ``.env`` file (if given).
3. ``ORACLE_*`` variables in the process environment.

An ``ORACLE_*`` variable that is empty or blank is treated as unset.

Networks, rollup config paths and L2 genesis paths are independently
optional. No cross-validation is done between them.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger("oracle_command")


class OracleConfig(BaseModel):
    """
    Immutable oracle server configuration.

    Sequence fields are stored as tuples; their order is preserved and
    is significant (the first L2 endpoint is the primary one).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    server: str = ""
    l1: str = ""
    l1_beacon: str = ""
    l2s: Tuple[str, ...] = ()
    networks: Tuple[str, ...] = ()
    rollup_config_paths: Tuple[str, ...] = ()
    l2_genesis_paths: Tuple[str, ...] = ()
    l2_custom: bool = False


# Environment variable -> config field
ENV_MAPPINGS = {
    "ORACLE_SERVER": "server",
    "ORACLE_L1": "l1",
    "ORACLE_L1_BEACON": "l1_beacon",
    "ORACLE_L2": "l2s",
    "ORACLE_NETWORKS": "networks",
    "ORACLE_ROLLUP_CONFIG": "rollup_config_paths",
    "ORACLE_L2_GENESIS": "l2_genesis_paths",
    "ORACLE_L2_CUSTOM": "l2_custom",
}

_LIST_FIELDS = {"l2s", "networks", "rollup_config_paths", "l2_genesis_paths"}

_TRUE_VALUES = ("true", "1", "yes")


def validate_config(config: OracleConfig) -> None:
    """
    Validate required configuration fields.

    Args:
        config: Configuration to check

    Raises:
        ConfigurationError: If a required field is empty or malformed
    """
    missing = [
        name for name in ("server", "l1", "l1_beacon")
        if not _present(getattr(config, name))
    ]
    if not config.l2s:
        missing.append("l2s")
    if missing:
        raise ConfigurationError(
            f"Missing required config fields: {missing}",
            missing_fields=missing,
        )

    blank = [i for i, endpoint in enumerate(config.l2s) if not _present(endpoint)]
    if blank:
        raise ConfigurationError(
            f"Blank L2 endpoint at positions {blank}",
            validation_errors=[f"l2s[{i}] is blank" for i in blank],
        )


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Failed to read configuration file at {path}: {exc}"
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file at {path} must contain a top-level object."
        )
    return data


def env_overrides(environ: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    """Translate ``ORACLE_*`` variables into config field values."""
    overrides: Dict[str, Any] = {}
    for env_key, field_name in ENV_MAPPINGS.items():
        value = environ.get(env_key)
        # Blank variables count as unset
        if value is None or not value.strip():
            continue
        if field_name in _LIST_FIELDS:
            overrides[field_name] = _split_list(value)
        elif field_name == "l2_custom":
            overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        else:
            overrides[field_name] = value
    return overrides


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> OracleConfig:
    """
    Load configuration from a JSON file and the environment.

    Args:
        config_path: Path to a JSON object keyed by field name
        env_file: Path to a .env file with ORACLE_* variables
        environ: Environment to read (defaults to os.environ)

    Raises:
        ConfigurationError: If a source can't be read, a value has the
            wrong type, or a required field ends up empty
    """
    data: Dict[str, Any] = {}
    if config_path:
        data.update(_load_json(Path(config_path).expanduser()))

    if env_file:
        if not Path(env_file).exists():
            raise ConfigurationError(f"Env file not found: {env_file}")
        data.update(env_overrides(dotenv_values(env_file)))
    data.update(env_overrides(os.environ if environ is None else environ))

    try:
        config = OracleConfig.model_validate(data)
    except ValidationError as exc:
        location = config_path or "environment"
        raise ConfigurationError(
            f"Invalid configuration in {location}",
            validation_errors=[
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ],
        ) from exc

    validate_config(config)
    logger.debug(f"Loaded oracle config from {config_path or 'environment'}")
    return config
