"""
Missing Value Handler
=====================
Counts nulls per column and applies the two default substitutions:
missing fish population becomes 0, missing breeding season becomes
'UNKNOWN'. No other column is filled.
"""

import logging
from typing import Dict

import pandas as pd

from .schema import (
    AVERAGE_SIZE,
    BREEDING_SEASON,
    COLUMNS,
    FISH_POPULATION,
    WATER_TEMPERATURE,
)

logger = logging.getLogger(__name__)


class MissingValueHandler:
    """
    Audits and remediates missing values in the working copy.

    Attributes:
        null_counts: Null counts per column from the last audit
        filled: Number of values filled per column by the last remediation
    """

    DEFAULTS = {
        FISH_POPULATION: 0,
        BREEDING_SEASON: 'UNKNOWN',
    }

    # Audit column labels; unit suffixes are dropped
    AUDIT_LABELS = {
        AVERAGE_SIZE: 'Null_Average_Size',
        WATER_TEMPERATURE: 'Null_Water_Temperature',
    }

    def __init__(self):
        """Initialize the MissingValueHandler."""
        self.null_counts: Dict[str, int] = {}
        self.filled: Dict[str, int] = {}

    @classmethod
    def audit_label(cls, column: str) -> str:
        """Name of the audit column for a dataset column."""
        return cls.AUDIT_LABELS.get(column, f'Null_{column}')

    def audit(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Count null values in every column.

        Args:
            df: Working copy

        Returns:
            One-row DataFrame with a Null_<column> count per column
        """
        logger.info("Auditing missing values...")

        self.null_counts = {
            col: int(df[col].isna().sum()) for col in COLUMNS if col in df.columns
        }

        total = sum(self.null_counts.values())
        if total > 0:
            logger.warning(f"  Found {total:,} null values")
            for col, count in self.null_counts.items():
                if count:
                    logger.warning(f"    {col}: {count:,}")
        else:
            logger.info("  No null values found")

        return pd.DataFrame([{
            self.audit_label(col): count
            for col, count in self.null_counts.items()
        }])

    def remediate(self, df: pd.DataFrame) -> Dict[str, int]:
        """
        Apply the default substitutions in place.

        Args:
            df: Working copy, modified in place

        Returns:
            Number of values filled per column
        """
        logger.info("Applying default values...")

        self.filled = {}

        for col, default in self.DEFAULTS.items():
            mask = df[col].isna()
            count = int(mask.sum())
            if count and isinstance(default, str):
                df[col] = df[col].astype(object).where(~mask, default)
            elif count:
                df.loc[mask, col] = default
            self.filled[col] = count
            logger.info(f"  {col}: {count:,} nulls set to {default!r}")

        return self.filled
