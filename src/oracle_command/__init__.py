"""
oracle_command - Oracle Server Command Builder
==============================================

Builds the argument vector that invokes the oracle server for one
dispute game: endpoints, data directory, game inputs, log level and
optional per-network overrides.

Quick Start:
    from oracle_command import OracleConfig, LocalGameInputs, Hash, build_oracle_command

    config = OracleConfig(
        server="./bin/op-program",
        l1="http://localhost:8545",
        l1_beacon="http://localhost:5052",
        l2s=["http://localhost:9545"],
    )
    inputs = LocalGameInputs(
        l1_head=Hash.from_hex("0x..."),
        l2_head=Hash.from_hex("0x..."),
        l2_output_root=Hash.from_hex("0x..."),
        l2_claim=Hash.from_hex("0x..."),
        l2_block_number=3333,
    )
    args = build_oracle_command(config, "/data/game", inputs, level="info")

With an injected logger, --log.level follows the logger's level:

    executor = OracleServerExecutor(logging.getLogger("my_service"))
    args = executor.oracle_command(config, "/data/game", inputs)
"""

from .args import ArgumentList, BareFlag, ValuedFlag, parse_tokens
from .config import OracleConfig, load_config, validate_config
from .errors import (
    OracleCommandError,
    ConfigurationError,
    LevelMappingError,
    GameInputError,
)
from .executor import OracleServerExecutor, build_oracle_command
from .log_levels import LogLevel, log_level_token
from .logging_config import no_op_logger, setup_logging
from .types import Hash, LocalGameInputs

__all__ = [
    # Builder
    "OracleServerExecutor",
    "build_oracle_command",
    "ArgumentList",
    "ValuedFlag",
    "BareFlag",
    "parse_tokens",
    # Config
    "OracleConfig",
    "load_config",
    "validate_config",
    # Inputs
    "Hash",
    "LocalGameInputs",
    # Logging
    "LogLevel",
    "log_level_token",
    "no_op_logger",
    "setup_logging",
    # Errors
    "OracleCommandError",
    "ConfigurationError",
    "LevelMappingError",
    "GameInputError",
]
__version__ = "1.0.0"
