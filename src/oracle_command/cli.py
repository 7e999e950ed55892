# Area: Shared
"""
oracle_command.cli - Command-line interface
===========================================

Prints the oracle server command for one dispute. The command is never
executed; pipe it to a launcher or copy it into a shell.

Usage:
    python -m oracle_command --config oracle.json --datadir /tmp/game \\
        --l1-head 0x... --l2-head 0x... --l2-output-root 0x... \\
        --l2-claim 0x... --l2-block-number 3333

Endpoints can also be given via ORACLE_* environment variables or an
env file (--env-file).
"""

import argparse
import json
import shlex
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import load_config
from .errors import GameInputError, OracleCommandError
from .executor import OracleServerExecutor
from .logging_config import log_error, setup_logging
from .types import LocalGameInputs

_INPUT_OPTIONS = {
    "l1_head": "--l1-head",
    "l2_head": "--l2-head",
    "l2_output_root": "--l2-output-root",
    "l2_claim": "--l2-claim",
    "l2_block_number": "--l2-block-number",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="oracle-command",
        description="Build the oracle server command for a dispute game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oracle-command --config oracle.json --datadir ./data --inputs game.json
  ORACLE_L1=http://localhost:8545 oracle-command --env-file .env \\
      --datadir ./data --inputs game.json --log-level debug --json
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--env-file", type=str, help="Path to .env file with ORACLE_* variables")
    parser.add_argument("--datadir", type=str, required=True, help="Oracle data directory")
    parser.add_argument("--inputs", type=str, help="Path to JSON file with the game inputs")
    for dest, flag in _INPUT_OPTIONS.items():
        parser.add_argument(flag, dest=dest, type=str)
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        help="trace, debug, info, warn, error or critical (default: info)",
    )
    parser.add_argument("--log-file", type=str, help="Write JSON logs to this file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the command as a JSON array instead of a shell line",
    )

    return parser.parse_args(argv)


def load_inputs(args: argparse.Namespace) -> LocalGameInputs:
    """Read game inputs from --inputs, overridden by the individual options."""
    data: Dict[str, Any] = {}
    if args.inputs:
        path = Path(args.inputs)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise GameInputError("inputs", args.inputs, f"cannot read file: {e}") from e
        if not isinstance(data, dict):
            raise GameInputError("inputs", args.inputs, "must contain a JSON object")

    for dest in _INPUT_OPTIONS:
        value = getattr(args, dest)
        if value is not None:
            data[dest] = value

    return LocalGameInputs.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        logger = setup_logging(args.log_level, log_file_path=args.log_file)
        config = load_config(args.config, env_file=args.env_file)
        inputs = load_inputs(args)
        command = OracleServerExecutor(logger).oracle_command(config, args.datadir, inputs)
    except OracleCommandError as e:
        log_error(e)
        return 1

    if args.json:
        print(json.dumps(command))
    else:
        print(shlex.join(command))
    return 0


if __name__ == "__main__":
    sys.exit(main())
