from __future__ import annotations

"""
CSV Export Writer.

Renders flat cheat table rows into the fixed six-column layout. Only the
Offsets column is quoted; every other field is written verbatim, so a
description holding a comma shifts the columns of its row.
"""

import logging
from typing import List

from cheattable2csv.domain.constants import CSV_COLUMNS
from cheattable2csv.domain.models import FlatEntry
from cheattable2csv.infra.fs import write_text_file

logger = logging.getLogger(__name__)


def render_csv(rows: List[FlatEntry]) -> str:
    """
    Build the CSV document for a list of flat rows.

    Output Format:
    ID,Description,VariableType,Address,SumAddress,Offsets
    <id>,<description>,<type>,<address>,<sum>,"<offsets>"

    Args:
        rows: Deduplicated flat rows in export order.

    Returns:
        str: Header line followed by one line per row, joined with '\\n'.
    """
    header = ",".join(CSV_COLUMNS) + "\n"
    body = "\n".join(
        f'{r.id},{r.description},{r.variable_type},{r.address},{r.sum_address},"{r.offsets}"'
        for r in rows
    )
    return header + body


def export_csv(rows: List[FlatEntry], target_path: str) -> None:
    """
    Persist the CSV document to disk, creating the parent directory if needed.

    Args:
        rows: Deduplicated flat rows in export order.
        target_path: Destination file.

    Raises:
        OSError: If the file cannot be written.
    """
    write_text_file(target_path, render_csv(rows))
    logger.info(f"CSV file has been created successfully at {target_path}.")
