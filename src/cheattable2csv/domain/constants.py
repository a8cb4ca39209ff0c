from __future__ import annotations

"""
Domain Constants.

Centralizes the sentinel values, defaults and export layout shared by the
conversion core, the infrastructure collaborators and the interface layer.
"""

from typing import List

# -----------------------------------------------------------------------------
# APPLICATION IDENTITY
# -----------------------------------------------------------------------------
APP_NAME = "CheatTable2CSV"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# CONVERSION SENTINELS
# -----------------------------------------------------------------------------
NOT_AVAILABLE = "N/A"
AUTO_ASSEMBLER_TYPE = "Auto Assembler Script"
ARROW_MARKER = "->"
HEX_PREFIX = "0x"
OFFSET_SEPARATOR = ", "

# Children below this depth are never descended into
DEFAULT_MAX_DEPTH = 5

# -----------------------------------------------------------------------------
# DEFAULT LOCATIONS
# -----------------------------------------------------------------------------
DEFAULT_INPUT_PATH = "data/person-player.xml"
DEFAULT_OUTPUT_PATH = "output/cheat_table.csv"

# -----------------------------------------------------------------------------
# CSV EXPORT LAYOUT
# -----------------------------------------------------------------------------
CSV_COLUMNS: List[str] = [
    "ID",
    "Description",
    "VariableType",
    "Address",
    "SumAddress",
    "Offsets",
]
