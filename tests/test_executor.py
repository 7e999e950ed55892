# Area: Builder Tests
"""Tests for OracleServerExecutor: flag order, optional flags, log levels."""

import logging
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from oracle_command import (
    BareFlag,
    ConfigurationError,
    GameInputError,
    LevelMappingError,
    OracleServerExecutor,
    ValuedFlag,
    build_oracle_command,
    no_op_logger,
    parse_tokens,
)
from oracle_command.args import flags_to_dict
from oracle_command.log_levels import TRACE

DATA_DIR = "mockdir"


def oracle_command(config, inputs, level=logging.INFO, **overrides):
    """Build a command and check the standard options; return name -> value."""
    cfg = config.model_copy(update=overrides)
    executor = OracleServerExecutor(no_op_logger(level))
    args = executor.oracle_command(cfg, DATA_DIR, inputs)
    pairs = flags_to_dict(parse_tokens(args))

    assert pairs["--server"] == cfg.server
    assert pairs["--l1"] == cfg.l1
    assert pairs["--l1.beacon"] == cfg.l1_beacon
    assert pairs["--l2"] == ",".join(cfg.l2s)
    assert pairs["--datadir"] == DATA_DIR
    assert pairs["--l1.head"] == inputs.l1_head.hex()
    assert pairs["--l2.head"] == inputs.l2_head.hex()
    assert pairs["--l2.outputroot"] == inputs.l2_output_root.hex()
    assert pairs["--l2.claim"] == inputs.l2_claim.hex()
    assert pairs["--l2.blocknumber"] == str(inputs.l2_block_number)
    return pairs


class TestStandardOptions:
    """Tests for the always-present flags."""

    def test_exact_command_without_extras(self, config, inputs):
        """Test that the full command matches the expected token list."""
        args = build_oracle_command(config, DATA_DIR, inputs, level="info")
        assert args == [
            "--server", "./bin/mockserver",
            "--l1", "http://localhost:8888",
            "--l1.beacon", "http://localhost:9000",
            "--l2", "http://localhost:9999,http://localhost:9999/two",
            "--datadir", "mockdir",
            "--l1.head", "0x11" + "00" * 31,
            "--l2.head", "0x22" + "00" * 31,
            "--l2.outputroot", "0x33" + "00" * 31,
            "--l2.claim", "0x44" + "00" * 31,
            "--l2.blocknumber", "3333",
            "--log.level", "INFO",
        ]

    def test_first_tokens_are_server(self, config, inputs):
        """Test that the command starts with --server and the server path."""
        args = build_oracle_command(config, DATA_DIR, inputs)
        assert args[:2] == ["--server", "./bin/mockserver"]

    def test_no_extras(self, config, inputs):
        """Test that optional flags are absent when nothing is configured."""
        pairs = oracle_command(config, inputs)
        assert "--network" not in pairs
        assert "--rollup.config" not in pairs
        assert "--l2.genesis" not in pairs
        assert "--l2.custom" not in pairs

    def test_single_l2_endpoint_not_joined(self, config, inputs):
        """Test that a single L2 endpoint is passed through unchanged."""
        pairs = oracle_command(config, inputs, l2s=("http://l2",))
        assert pairs["--l2"] == "http://l2"

    def test_large_block_number_rendered_in_decimal(self, config, inputs):
        """Test that block numbers beyond 64 bits render in plain decimal."""
        big = replace(inputs, l2_block_number=2**80)
        pairs = oracle_command(config, big)
        assert pairs["--l2.blocknumber"] == "1208925819614629174706176"

    def test_path_data_dir_accepted(self, config, inputs, tmp_path):
        """Test that a pathlib data directory is rendered as a string."""
        args = build_oracle_command(config, tmp_path / "game", inputs)
        assert args[args.index("--datadir") + 1] == str(tmp_path / "game")

    def test_dash_prefixed_data_dir_kept_as_value(self, config, inputs):
        """Test that a data directory starting with -- stays the --datadir value."""
        args = build_oracle_command(config, "--weird-dir", inputs)
        pairs = flags_to_dict(parse_tokens(args))
        assert pairs["--datadir"] == "--weird-dir"
        assert pairs["--l1.head"] == inputs.l1_head.hex()

    def test_idempotent(self, config, inputs):
        """Test that identical inputs give identical commands."""
        first = build_oracle_command(config, DATA_DIR, inputs)
        second = build_oracle_command(config, DATA_DIR, inputs)
        assert first == second

    def test_config_not_mutated(self, config, inputs):
        """Test that building a command leaves the config unchanged."""
        before = config.model_dump()
        build_oracle_command(config, DATA_DIR, inputs)
        assert config.model_dump() == before


class TestOptionalFlags:
    """Tests for --network, --rollup.config, --l2.genesis and --l2.custom."""

    def test_with_network(self, config, inputs):
        """Test that a single network is emitted."""
        pairs = oracle_command(config, inputs, networks=("op-test",))
        assert pairs["--network"] == "op-test"

    def test_with_multiple_networks(self, config, inputs):
        """Test that networks are comma-joined in order."""
        pairs = oracle_command(config, inputs, networks=("op-test", "op-other"))
        assert pairs["--network"] == "op-test,op-other"

    def test_with_l2_custom(self, config, inputs):
        """Test that l2_custom adds the bare --l2.custom flag."""
        pairs = oracle_command(config, inputs, l2_custom=True)
        assert pairs["--l2.custom"] is True

    def test_l2_custom_is_trailing_bare_token(self, config, inputs):
        """Test that --l2.custom is the single final token."""
        cfg = config.model_copy(update={"l2_custom": True, "networks": ("op-test",)})
        args = build_oracle_command(cfg, DATA_DIR, inputs)
        assert args[-1] == "--l2.custom"
        assert args.count("--l2.custom") == 1

    def test_with_rollup_config_path(self, config, inputs):
        """Test that a single rollup config path is emitted."""
        pairs = oracle_command(config, inputs, rollup_config_paths=("rollup.config.json",))
        assert pairs["--rollup.config"] == "rollup.config.json"

    def test_with_multiple_rollup_config_paths(self, config, inputs):
        """Test that rollup config paths are comma-joined in order."""
        pairs = oracle_command(
            config, inputs, rollup_config_paths=("rollup.config.json", "rollup2.json"),
        )
        assert pairs["--rollup.config"] == "rollup.config.json,rollup2.json"

    def test_with_l2_genesis_path(self, config, inputs):
        """Test that a single L2 genesis path is emitted."""
        pairs = oracle_command(config, inputs, l2_genesis_paths=("genesis.json",))
        assert pairs["--l2.genesis"] == "genesis.json"

    def test_with_multiple_l2_genesis_paths(self, config, inputs):
        """Test that L2 genesis paths are comma-joined in order."""
        pairs = oracle_command(
            config, inputs, l2_genesis_paths=("genesis.json", "genesis2.json"),
        )
        assert pairs["--l2.genesis"] == "genesis.json,genesis2.json"

    def test_duplicates_kept(self, config, inputs):
        """Test that repeated list entries are not deduplicated."""
        pairs = oracle_command(config, inputs, networks=("op-test", "op-test"))
        assert pairs["--network"] == "op-test,op-test"

    def test_with_all_extras(self, config, inputs):
        """Test that all optional lists may be set together."""
        pairs = oracle_command(
            config, inputs,
            networks=("op-test",),
            rollup_config_paths=("rollup.config.json",),
            l2_genesis_paths=("genesis.json",),
        )
        assert pairs["--network"] == "op-test"
        assert pairs["--rollup.config"] == "rollup.config.json"
        assert pairs["--l2.genesis"] == "genesis.json"

    def test_optional_flag_order(self, config, inputs):
        """Test that optional flags follow --log.level in fixed order."""
        cfg = config.model_copy(update={
            "networks": ("op-test",),
            "rollup_config_paths": ("rollup.config.json",),
            "l2_genesis_paths": ("genesis.json",),
            "l2_custom": True,
        })
        flags = OracleServerExecutor(no_op_logger()).build_arguments(cfg, DATA_DIR, inputs).flags()
        names = [flag.name for flag in flags]
        assert names[10:] == [
            "--log.level", "--network", "--rollup.config", "--l2.genesis", "--l2.custom",
        ]
        assert flags[-1] == BareFlag("--l2.custom")
        assert flags[0] == ValuedFlag("--server", "./bin/mockserver")


class TestLogLevel:
    """Tests for the --log.level token."""

    @pytest.mark.parametrize("level,token", [
        (TRACE, "TRACE"),
        (logging.DEBUG, "DEBUG"),
        (logging.INFO, "INFO"),
        (logging.WARNING, "WARN"),
        (logging.ERROR, "ERROR"),
        (logging.CRITICAL, "CRIT"),
    ])
    def test_log_level_follows_logger(self, config, inputs, level, token):
        """Test that --log.level follows the injected logger's level."""
        pairs = oracle_command(config, inputs, level=level)
        assert pairs["--log.level"] == token

    def test_log_level_present_once(self, config, inputs):
        """Test that --log.level appears exactly once."""
        args = build_oracle_command(config, DATA_DIR, inputs)
        assert args.count("--log.level") == 1

    def test_explicit_level_overrides_logger(self, config, inputs):
        """Test that an explicit level wins over the logger's level."""
        executor = OracleServerExecutor(no_op_logger(logging.ERROR), level="debug")
        args = executor.oracle_command(config, DATA_DIR, inputs)
        assert args[args.index("--log.level") + 1] == "DEBUG"

    def test_unknown_level_rejected(self, config, inputs):
        """Test that a logger level outside the six severities raises."""
        logger = logging.Logger("test.unknown", 25)
        with pytest.raises(LevelMappingError):
            OracleServerExecutor(logger).oracle_command(config, DATA_DIR, inputs)

    def test_unknown_explicit_level_rejected(self, config, inputs):
        """Test that an unknown explicit level name raises."""
        with pytest.raises(LevelMappingError):
            build_oracle_command(config, DATA_DIR, inputs, level="verbose")


class TestErrors:
    """Tests for all-or-nothing construction."""

    @pytest.mark.parametrize("field", ["server", "l1", "l1_beacon"])
    def test_empty_required_field(self, config, inputs, field):
        """Test that an empty required field raises ConfigurationError."""
        cfg = config.model_copy(update={field: ""})
        with pytest.raises(ConfigurationError) as exc_info:
            build_oracle_command(cfg, DATA_DIR, inputs)
        assert field in exc_info.value.missing_fields

    def test_no_l2_endpoints(self, config, inputs):
        """Test that a config without L2 endpoints raises."""
        cfg = config.model_copy(update={"l2s": ()})
        with pytest.raises(ConfigurationError) as exc_info:
            build_oracle_command(cfg, DATA_DIR, inputs)
        assert exc_info.value.missing_fields == ["l2s"]

    def test_blank_l2_endpoint(self, config, inputs):
        """Test that a blank L2 endpoint raises."""
        cfg = config.model_copy(update={"l2s": ("http://l2", " ")})
        with pytest.raises(ConfigurationError):
            build_oracle_command(cfg, DATA_DIR, inputs)

    def test_empty_data_dir(self, config, inputs):
        """Test that an empty data directory raises."""
        with pytest.raises(ConfigurationError) as exc_info:
            build_oracle_command(config, "", inputs)
        assert exc_info.value.missing_fields == ["data_dir"]

    def test_wrong_inputs_type(self, config):
        """Test that inputs of the wrong type raise GameInputError."""
        with pytest.raises(GameInputError):
            build_oracle_command(config, DATA_DIR, {"l2_block_number": 1})

    def test_level_error_emits_no_log(self, config, inputs):
        """Test that nothing is logged when the level cannot be mapped."""
        logger = MagicMock()
        logger.getEffectiveLevel.return_value = 25
        with pytest.raises(LevelMappingError):
            OracleServerExecutor(logger).oracle_command(config, DATA_DIR, inputs)
        logger.log.assert_not_called()


class TestDiagnosticLog:
    """Tests for the diagnostic record emitted through the injected logger."""

    def test_one_record_at_logger_level(self, config, inputs, caplog):
        """Test that one record is logged at the logger's level."""
        caplog.set_level(logging.INFO, logger="test.oracle_command")
        logger = logging.getLogger("test.oracle_command")
        args = OracleServerExecutor(logger).oracle_command(config, DATA_DIR, inputs)

        records = [r for r in caplog.records if r.name == "test.oracle_command"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "--server ./bin/mockserver" in records[0].getMessage()
        assert args[-1] == "INFO"

    def test_failing_logger_does_not_change_result(self, config, inputs):
        """Test that a raising logger only produces a warning."""
        expected = build_oracle_command(config, DATA_DIR, inputs)
        logger = MagicMock()
        logger.getEffectiveLevel.return_value = logging.INFO
        logger.log.side_effect = RuntimeError("log sink down")

        with pytest.warns(RuntimeWarning, match="log sink down"):
            args = OracleServerExecutor(logger).oracle_command(config, DATA_DIR, inputs)
        assert args == expected
