"""
Validation for tabular hex exports.

Every export carries h3_id and res columns plus the aggregate columns; these
checks run before anything is written to disk.
"""
from __future__ import annotations

from typing import Optional, Set

import pandas as pd

HEX_OUTPUT_COLUMNS = {"h3_id", "res", "total_mw", "turbine_count"}


def validate_frame_schema(
    df: pd.DataFrame,
    required_columns: Set[str],
    source_path: Optional[str] = None
) -> None:
    """
    Validate that a DataFrame has all required columns.

    Raises:
        ValueError: if any required columns are missing
    """
    missing = required_columns - set(df.columns)
    if missing:
        source = f" from {source_path}" if source_path else ""
        raise ValueError(
            f"Missing required columns{source}: {missing}. "
            f"Found columns: {set(df.columns)}"
        )


def validate_hex_output(
    df: pd.DataFrame,
    expected_columns: Set[str] = HEX_OUTPUT_COLUMNS,
    h3_id_column: str = "h3_id",
    res_column: str = "res"
) -> None:
    """
    Validate the hex export schema and aggregate invariants.

    Checks column presence, h3_id uint64 / res int32 dtypes, no null or
    duplicate (h3_id, res) keys, turbine_count >= 1 and total_mw >= 0.

    Raises:
        ValueError: if any check fails
    """
    validate_frame_schema(df, expected_columns)

    if df[h3_id_column].dtype != "uint64":
        raise ValueError(
            f"Column '{h3_id_column}' must be uint64, got {df[h3_id_column].dtype}"
        )

    if df[res_column].dtype != "int32":
        raise ValueError(
            f"Column '{res_column}' must be int32, got {df[res_column].dtype}"
        )

    null_count = df[h3_id_column].isna().sum()
    if null_count > 0:
        raise ValueError(f"Found {null_count} null values in '{h3_id_column}' column")

    dup_count = df.duplicated(subset=[h3_id_column, res_column]).sum()
    if dup_count > 0:
        raise ValueError(
            f"Found {dup_count} duplicate ({h3_id_column}, {res_column}) pairs"
        )

    if "turbine_count" in df.columns and (df["turbine_count"] < 1).any():
        raise ValueError("Found aggregates with turbine_count < 1")

    if "total_mw" in df.columns and (df["total_mw"] < 0).any():
        raise ValueError("Found aggregates with negative total_mw")
