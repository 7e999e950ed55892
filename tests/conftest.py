# Area: Shared Tests
"""Shared fixtures for oracle command tests."""

import os

import pytest

from oracle_command import Hash, LocalGameInputs, OracleConfig


@pytest.fixture
def config():
    return OracleConfig(
        server="./bin/mockserver",
        l1="http://localhost:8888",
        l1_beacon="http://localhost:9000",
        l2s=["http://localhost:9999", "http://localhost:9999/two"],
    )


@pytest.fixture
def inputs():
    return LocalGameInputs(
        l1_head=Hash.from_prefix(b"\x11"),
        l2_head=Hash.from_prefix(b"\x22"),
        l2_output_root=Hash.from_prefix(b"\x33"),
        l2_claim=Hash.from_prefix(b"\x44"),
        l2_block_number=3333,
    )


@pytest.fixture(autouse=True)
def clean_oracle_env(monkeypatch):
    """Keep ORACLE_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("ORACLE_"):
            monkeypatch.delenv(key)
