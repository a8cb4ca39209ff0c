from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate a
conversion outcome from the pipeline engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ConversionResult:
    """
    Unified result object of a conversion run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized source cheat table path.
        output_path: Normalized CSV destination path.
        max_depth: Depth limit applied while flattening.
        dry_run: Whether the export write was skipped.
        entries_found: Number of top-level entries decoded.
        rows_flattened: Number of rows before deduplication.
        rows_exported: Number of rows after deduplication.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    max_depth: int
    dry_run: bool = False

    entries_found: int = 0
    rows_flattened: int = 0
    rows_exported: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ConversionResult:
    """
    Create a failed conversion result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: The normalized source path.
        output_path: The normalized destination path, if resolved.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ConversionResult: An immutable error result object.
    """
    return ConversionResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=output_path,
        max_depth=cfg.get("max_depth", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        *,
        dry_run: bool,
        entries_found: int,
        rows_flattened: int,
        rows_exported: int,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ConversionResult:
    """
    Create a successful conversion result instance.

    Args:
        cfg: Final configuration used during execution.
        input_path: The normalized source path.
        output_path: The normalized destination path.
        dry_run: Whether the write was simulated.
        entries_found: Top-level entry count.
        rows_flattened: Row count before deduplication.
        rows_exported: Row count after deduplication.
        summary_extra: Final execution metrics.

    Returns:
        ConversionResult: An immutable success result object.
    """
    return ConversionResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        max_depth=cfg.get("max_depth", 0),
        dry_run=dry_run,
        entries_found=entries_found,
        rows_flattened=rows_flattened,
        rows_exported=rows_exported,
        summary=summary_extra or {},
    )
