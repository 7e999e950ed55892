# Area: Builder
"""
oracle_command.executor - Oracle server command builder
=======================================================

Turns an OracleConfig, a data directory and the dispute's game inputs
into the argument vector for the oracle server. Flag names, their order,
the list separator and the bare ``--l2.custom`` flag are the contract
with the server's CLI; changing any of them breaks that CLI.

The builder never launches the process and never touches the data
directory. Nothing is returned unless every argument could be built.
"""

from __future__ import annotations
import logging
import os
import shlex
import warnings
from typing import List, Optional, Union

from .args import ArgumentList
from .config import OracleConfig, validate_config
from .errors import ConfigurationError, GameInputError
from .log_levels import LevelLike, LogLevel, logger_level, to_log_level
from .logging_config import no_op_logger
from .types import LocalGameInputs

PathLike = Union[str, "os.PathLike[str]"]


class OracleServerExecutor:
    """
    Builds oracle server invocations.

    Usage
    -----
        executor = OracleServerExecutor(logging.getLogger("oracle_command"))
        args = executor.oracle_command(config, "/data/game-42", inputs)

    The ``--log.level`` passed to the server follows the injected logger's
    effective level, unless ``level`` is given explicitly.
    """

    def __init__(self, logger: logging.Logger, level: Optional[LevelLike] = None):
        self.logger = logger
        self.level = level

    def resolve_level(self) -> LogLevel:
        if self.level is not None:
            return to_log_level(self.level)
        return logger_level(self.logger)

    def build_arguments(
        self,
        config: OracleConfig,
        data_dir: PathLike,
        inputs: LocalGameInputs,
    ) -> ArgumentList:
        """
        Assemble the tagged argument list.

        Raises:
            ConfigurationError: If a required endpoint, the server path or
                the data directory is empty
            GameInputError: If inputs is not a LocalGameInputs
            LevelMappingError: If the severity has no server token
        """
        validate_config(config)
        data_dir = os.fspath(data_dir)
        if not data_dir:
            raise ConfigurationError("Data directory is empty", missing_fields=["data_dir"])
        if not isinstance(inputs, LocalGameInputs):
            raise GameInputError("inputs", inputs, "expected LocalGameInputs")
        level = self.resolve_level()

        args = ArgumentList()
        args.add("--server", config.server)
        args.add("--l1", config.l1)
        args.add("--l1.beacon", config.l1_beacon)
        args.add_joined("--l2", config.l2s)
        args.add("--datadir", data_dir)
        args.add("--l1.head", inputs.l1_head.hex())
        args.add("--l2.head", inputs.l2_head.hex())
        args.add("--l2.outputroot", inputs.l2_output_root.hex())
        args.add("--l2.claim", inputs.l2_claim.hex())
        args.add("--l2.blocknumber", str(inputs.l2_block_number))
        args.add("--log.level", level.token)
        args.add_joined("--network", config.networks)
        args.add_joined("--rollup.config", config.rollup_config_paths)
        args.add_joined("--l2.genesis", config.l2_genesis_paths)
        if config.l2_custom:
            args.add_bare("--l2.custom")
        return args

    def oracle_command(
        self,
        config: OracleConfig,
        data_dir: PathLike,
        inputs: LocalGameInputs,
    ) -> List[str]:
        """Return the flat argument vector for the oracle server."""
        args = self.build_arguments(config, data_dir, inputs)
        tokens = args.tokens()
        self._log_command(tokens)
        return tokens

    def _log_command(self, tokens: List[str]) -> None:
        # A failing logger must not change the returned command
        try:
            self.logger.log(
                self.resolve_level().number,
                f"Oracle server command: {shlex.join(tokens)}",
            )
        except Exception as e:
            warnings.warn(f"Could not log oracle command: {e}", RuntimeWarning)


def build_oracle_command(
    config: OracleConfig,
    data_dir: PathLike,
    inputs: LocalGameInputs,
    logger: Optional[logging.Logger] = None,
    level: Optional[LevelLike] = None,
) -> List[str]:
    """
    Build the oracle server argument vector.

    Args:
        config: Endpoints and per-network overrides
        data_dir: Directory the server keeps its data in (not created here)
        inputs: Hashes and block number of the dispute
        logger: Logger for the diagnostic record (defaults to a no-op logger)
        level: Severity for --log.level (defaults to the logger's level)

    Raises:
        OracleCommandError: If any part of the command can't be built
    """
    executor = OracleServerExecutor(logger or no_op_logger(), level=level)
    return executor.oracle_command(config, data_dir, inputs)
