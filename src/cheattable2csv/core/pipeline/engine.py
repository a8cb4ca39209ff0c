from __future__ import annotations

"""
Core conversion pipeline.

This module coordinates the whole conversion of one cheat table:
1. Validates configuration and paths.
2. Checks for an existing export (overwrite protection).
3. Loads and decodes the source file.
4. Flattens the entry tree and removes repeated ids.
5. Writes the CSV export (skipped in dry-run mode).

Conversion errors raised by the decoder, the evaluator or the flattener are
not caught here. The export is written only after every row was built, so a
failed run never leaves a partial file behind.
"""

import logging
import os
from typing import Any, Dict, Optional

from cheattable2csv.core.dedupe import dedupe_entries
from cheattable2csv.core.flattener import flatten_entries
from cheattable2csv.core.pipeline.validator import validate_config
from cheattable2csv.domain.errors import DecodeError
from cheattable2csv.domain.pipeline_models import (
    ConversionResult,
    create_error_result,
    create_success_result,
)
from cheattable2csv.infra.csv_writer import export_csv
from cheattable2csv.infra.fs import normalize_path, read_text_file
from cheattable2csv.infra.xml_decoder import decode_cheat_table

logger = logging.getLogger(__name__)


def run_conversion(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
) -> ConversionResult:
    """
    Execute the full cheat table to CSV conversion.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, replace an existing export file.
        dry_run: If True, run every stage except the final write.

    Returns:
        ConversionResult: Object containing status, counters and summary.

    Raises:
        CheatTableError: On undecodable markup, malformed trees or invalid
                         address expressions.
        OSError: If the source cannot be read or the export cannot be written.
    """
    logger.info("Starting the cheat table processing...")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    input_path = normalize_path(cfg["input_path"], cwd)
    output_path = normalize_path(cfg["output_path"], cwd)
    max_depth = cfg["max_depth"]

    if not os.path.isfile(input_path):
        msg = f"Invalid input file: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, output_path)

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    allow_overwrite = overwrite or cfg["overwrite"]
    if os.path.exists(output_path) and not allow_overwrite and not dry_run:
        msg = "Existing export detected and overwrite=False. Aborting."
        logger.warning(f"{msg} File: {output_path}")
        return create_error_result(
            msg, cfg, input_path, output_path,
            summary_extra={"existing_file": output_path}
        )

    # -------------------------------------------------------------------------
    # 3) Load & Decode
    # -------------------------------------------------------------------------
    logger.info(f"Loading cheat table from file: {input_path}")
    try:
        xml_text = read_text_file(input_path)
    except UnicodeDecodeError as e:
        raise DecodeError(f"XML Parsing Error: {e}") from e
    logger.info("Cheat table file loaded successfully.")

    entries = decode_cheat_table(xml_text)
    logger.info(f"Found {len(entries)} cheat entries.")

    # -------------------------------------------------------------------------
    # 4) Flatten & Deduplicate
    # -------------------------------------------------------------------------
    flat_rows = flatten_entries(entries, max_depth=max_depth)
    logger.debug(f"Flattened {len(flat_rows)} rows (max_depth={max_depth}).")

    unique_rows = dedupe_entries(flat_rows)

    # -------------------------------------------------------------------------
    # 5) Export
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info(f"Dry run: skipping write of {output_path}")
    else:
        export_csv(unique_rows, output_path)

    return create_success_result(
        cfg,
        input_path,
        output_path,
        dry_run=dry_run,
        entries_found=len(entries),
        rows_flattened=len(flat_rows),
        rows_exported=len(unique_rows),
        summary_extra={"duplicates_removed": len(flat_rows) - len(unique_rows)},
    )
