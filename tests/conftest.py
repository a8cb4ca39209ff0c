from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample cheat tables.
3. A logging reset fixture for tests that bootstrap the logging subsystem.
"""

import logging
import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Data
# -----------------------------------------------------------------------------
SAMPLE_CHEAT_TABLE = """<?xml version="1.0" encoding="utf-8"?>
<CheatTable CheatEngineTableVersion="45">
  <CheatEntries>
    <CheatEntry>
      <ID>0</ID>
      <Description>"Player ->"</Description>
      <ShowAsSigned>0</ShowAsSigned>
      <VariableType>4 Bytes</VariableType>
      <Address>1000+20</Address>
      <Offsets>
        <Offset>10</Offset>
        <Offset>0x8</Offset>
      </Offsets>
      <CheatEntries>
        <CheatEntry>
          <ID>1</ID>
          <Description>"Health"</Description>
          <VariableType>Float</VariableType>
          <Address>2000</Address>
        </CheatEntry>
        <CheatEntry>
          <ID>2</ID>
          <Description>"Infinite ammo script"</Description>
          <VariableType>Auto Assembler Script</VariableType>
        </CheatEntry>
        <CheatEntry>
          <ID>3</ID>
          <Description>"Ammo"</Description>
          <VariableType>4 Bytes</VariableType>
          <Address>3000-10</Address>
        </CheatEntry>
      </CheatEntries>
    </CheatEntry>
    <CheatEntry>
      <ID>4</ID>
      <Description>"Gold"</Description>
      <VariableType>4 Bytes</VariableType>
      <Address>4A</Address>
    </CheatEntry>
  </CheatEntries>
</CheatTable>
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'cheattable2csv.domain.config'.
    """
    return {
        # IO Paths
        "input_path": "/tmp/test_input/table.CT",
        "output_path": "/tmp/test_output/table.csv",

        # Flattening
        "max_depth": 5,

        # Safety
        "overwrite": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def sample_table_xml() -> str:
    """Return the markup of a small two-level cheat table."""
    return SAMPLE_CHEAT_TABLE


@pytest.fixture
def sample_table_file(tmp_path) -> str:
    """Write the sample cheat table to disk and return its path."""
    path = tmp_path / "person-player.CT"
    path.write_text(SAMPLE_CHEAT_TABLE, encoding="utf-8")
    return str(path)


@pytest.fixture
def reset_logging():
    """Detach the application's logging handlers before and after a test."""
    from cheattable2csv.infra.logging import shutdown_logging

    shutdown_logging()
    yield logging.getLogger()
    shutdown_logging()
