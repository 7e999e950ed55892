"""
Example: build an oracle server command for a dispute game
==========================================================

Run from the repository root after ``pip install -e .``:

    python examples/build_command.py
"""

import logging
import shlex

from oracle_command import (
    Hash,
    LocalGameInputs,
    OracleConfig,
    OracleServerExecutor,
    setup_logging,
)


def main():
    logger = setup_logging(logging.DEBUG)

    config = OracleConfig(
        server="./bin/op-program",
        l1="http://localhost:8545",
        l1_beacon="http://localhost:5052",
        l2s=["http://localhost:9545"],
        networks=["op-sepolia"],
    )
    inputs = LocalGameInputs(
        l1_head=Hash.from_prefix(b"\x11"),
        l2_head=Hash.from_prefix(b"\x22"),
        l2_output_root=Hash.from_prefix(b"\x33"),
        l2_claim=Hash.from_prefix(b"\x44"),
        l2_block_number=3333,
    )

    args = OracleServerExecutor(logger).oracle_command(config, "./data/game-3333", inputs)
    print(shlex.join(args))


if __name__ == "__main__":
    main()
