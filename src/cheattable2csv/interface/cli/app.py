from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, an optional config file and
CLI overrides), conversion execution and result rendering. This is the
single place where conversion errors are caught and reported.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from cheattable2csv.core.pipeline.engine import run_conversion
from cheattable2csv.core.pipeline.validator import validate_config
from cheattable2csv.domain.config import get_default_config, load_config, save_config
from cheattable2csv.domain.errors import CheatTableError
from cheattable2csv.domain.pipeline_models import ConversionResult
from cheattable2csv.infra.fs import normalize_path
from cheattable2csv.infra.logging import LoggingConfig, configure_logging, get_logger
from cheattable2csv.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (defaults, or an explicit config file)
    base_conf = load_config(args.config_file) if args.config_file else get_default_config()

    # 3. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 5. Logging bootstrap (console on stderr, optional run log file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    )
    configure_logging(logging_conf)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf, args.save_config)

    # 6. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not os.path.isfile(input_path):
        logger.error(f"Input file does not exist: {input_path}")
        return 2

    # 7. Conversion phase
    try:
        result = run_conversion(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Conversion interrupted by user.")
        return 130
    except CheatTableError as e:
        logger.error(f"Conversion Error: {e}")
        return 1
    except Exception as e:
        logger.critical(f"Unexpected Error: {e}", exc_info=True)
        return 1

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "output_path", "max_depth",
        "overwrite", "log_level", "log_file",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ConversionResult) -> None:
    """
    Format and print the conversion result to the standard output.

    Args:
        result: The conversion result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("SIMULATION COMPLETE (dry run, nothing written)")
        print(f"Target file: {result.output_path}")
    else:
        print("CSV conversion completed.")
        print(f"Output file: {result.output_path}")

    stats = {
        "Top-level entries": result.entries_found,
        "Rows flattened": result.rows_flattened,
        "Rows exported": result.rows_exported,
        "Duplicates removed": result.summary.get("duplicates_removed", 0),
    }
    for label, value in stats.items():
        print(f"{label}: {value}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
