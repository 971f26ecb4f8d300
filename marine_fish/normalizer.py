"""
Data Normalizer Module
======================
Trims whitespace from the text columns and converts the measurement
columns to floating point. Works in place on the working copy.
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .schema import FLOAT_COLUMNS, TEXT_COLUMNS

logger = logging.getLogger(__name__)


def _strip(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


class DataNormalizer:
    """
    Normalizes the marine fish working copy.

    Both steps are idempotent: running them twice gives the same frame
    as running them once.

    Attributes:
        stats: Dictionary of normalization statistics
    """

    def __init__(
        self,
        text_columns: Optional[List[str]] = None,
        float_columns: Optional[List[str]] = None
    ):
        """
        Initialize the DataNormalizer.

        Args:
            text_columns: Columns to trim (default: the six text columns)
            float_columns: Columns to convert to float64
        """
        self.text_columns = list(TEXT_COLUMNS if text_columns is None else text_columns)
        self.float_columns = list(FLOAT_COLUMNS if float_columns is None else float_columns)
        self.stats: Dict[str, Any] = {}

    def normalize(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Apply all normalizations to the working copy.

        Args:
            df: Working copy, modified in place

        Returns:
            The same DataFrame
        """
        logger.info("Normalizing working copy...")

        self.trim_text_columns(df)
        self.coerce_float_columns(df)

        self._log_stats()

        return df

    def trim_text_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Strip leading and trailing whitespace from the text columns.
        Nulls and non-string values are left as they are.

        Args:
            df: Input DataFrame, modified in place

        Returns:
            The same DataFrame
        """
        trimmed: Dict[str, int] = {}

        for col in self.text_columns:
            if col not in df.columns:
                continue

            original = df[col]
            stripped = original.map(_strip)

            trimmed[col] = sum(
                1 for before, after in zip(original, stripped)
                if isinstance(before, str) and before != after
            )

            df[col] = stripped

        self.stats['trimmed_values'] = trimmed

        total = sum(trimmed.values())
        if total > 0:
            logger.info(f"  Trimmed whitespace from {total:,} values")
            for col, count in trimmed.items():
                if count:
                    logger.debug(f"    {col}: {count:,}")
        else:
            logger.info("  No surrounding whitespace found")

        return df

    def coerce_float_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Store the measurement columns as float64. Integer values convert
        without loss (12 -> 12.0).

        Args:
            df: Input DataFrame, modified in place

        Returns:
            The same DataFrame
        """
        converted: List[str] = []

        for col in self.float_columns:
            if col not in df.columns:
                continue

            if df[col].dtype != np.float64:
                df[col] = pd.to_numeric(df[col]).astype(np.float64)
                converted.append(col)

        self.stats['float_columns_converted'] = converted

        logger.info(
            f"  Float columns: {len(self.float_columns)} checked, "
            f"{len(converted)} converted"
        )

        return df

    def get_stats(self) -> Dict[str, Any]:
        """
        Get normalization statistics.

        Returns:
            Dictionary of statistics
        """
        return self.stats

    def _log_stats(self) -> None:
        """Log normalization statistics."""
        trimmed = self.stats.get('trimmed_values', {})
        converted = self.stats.get('float_columns_converted', [])
        logger.info(
            f"  Normalization complete: {sum(trimmed.values()):,} values trimmed, "
            f"{len(converted)} columns converted to float"
        )
