"""
Quality Checks Module
=====================
Read-only diagnostics over the working copy:
A) Duplicate detection on the full business key
B) Range validation (negative population, size or temperature)
C) Final integrity check (residual nulls in required columns)
D) Advisory checks (blank species names, unexpected risk values)

None of these checks change or drop rows. Findings are returned as
DataFrames for human review.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from .schema import (
    BUSINESS_KEY,
    COLUMNS,
    NON_NEGATIVE_COLUMNS,
    OVERFISHING_RISK,
    RISK_VALUES,
    SPECIES_NAME,
)

logger = logging.getLogger(__name__)


@dataclass
class QualityCheckResult:
    """Container for quality check results."""
    check_name: str
    passed: bool
    severity: int  # 1-10 scale
    details: Dict[str, Any] = field(default_factory=dict)
    affected_rows: List[int] = field(default_factory=list)


class QualityChecker:
    """
    Runs the diagnostic queries on the marine fish working copy.

    Attributes:
        results: List of QualityCheckResult objects
        metrics: Finding counts keyed by check
    """

    DUPLICATE_COUNT = 'Duplicate_Count'

    def __init__(self):
        """Initialize the QualityChecker."""
        self.results: List[QualityCheckResult] = []
        self.metrics: Dict[str, Any] = {}

    # =========================================================================
    # A) DUPLICATE DETECTION
    # =========================================================================

    def find_duplicates(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Group rows by all nine business columns and report groups with
        more than one member. Nulls in the same column group together.

        Args:
            df: Working copy

        Returns:
            One row per duplicate group: the key columns plus Duplicate_Count
        """
        logger.info("  [A] Checking for duplicates...")

        counts = (
            df.groupby(BUSINESS_KEY, dropna=False, sort=False)
            .size()
            .reset_index(name=self.DUPLICATE_COUNT)
        )
        duplicates = counts[counts[self.DUPLICATE_COUNT] > 1].reset_index(drop=True)

        dup_mask = df.duplicated(subset=BUSINESS_KEY, keep=False)
        dup_rows = int(dup_mask.sum())
        dup_pct = (dup_rows / len(df)) * 100 if len(df) > 0 else 0

        if dup_pct > 20:
            severity = 9
        elif dup_pct > 10:
            severity = 7
        elif dup_pct > 5:
            severity = 5
        elif dup_pct > 0:
            severity = 3
        else:
            severity = 0

        self.results.append(QualityCheckResult(
            check_name='duplicates',
            passed=duplicates.empty,
            severity=severity,
            details={
                'duplicate_groups': len(duplicates),
                'duplicate_rows': dup_rows,
                'duplicate_pct': dup_pct,
                'total_rows': len(df)
            },
            affected_rows=df.index[dup_mask].tolist()
        ))

        self.metrics['duplicate_groups'] = len(duplicates)
        self.metrics['duplicate_rows'] = dup_rows

        if duplicates.empty:
            logger.info("    No duplicate rows")
        else:
            logger.warning(
                f"    Found {len(duplicates):,} duplicate groups "
                f"covering {dup_rows:,} rows ({dup_pct:.2f}%)"
            )

        return duplicates

    # =========================================================================
    # B) RANGE VALIDATION
    # =========================================================================

    def find_out_of_range(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Select rows with a negative population, average size or water
        temperature. Nulls never match.

        Negative water temperature counts as invalid here even though
        polar seas can be below zero.

        Args:
            df: Working copy

        Returns:
            Offending rows, unchanged
        """
        logger.info("  [B] Checking value ranges...")

        mask = pd.Series(False, index=df.index)
        per_column: Dict[str, int] = {}

        for col in NON_NEGATIVE_COLUMNS:
            negative = (df[col] < 0).fillna(False).astype(bool)
            per_column[col] = int(negative.sum())
            mask |= negative

        invalid = df.loc[mask].copy()

        self.results.append(QualityCheckResult(
            check_name='out_of_range',
            passed=invalid.empty,
            severity=min(10, len(invalid)),
            details={
                'invalid_rows': len(invalid),
                'negative_by_column': per_column
            },
            affected_rows=invalid.index.tolist()
        ))

        self.metrics['out_of_range_rows'] = len(invalid)

        if invalid.empty:
            logger.info("    All numeric values non-negative")
        else:
            logger.warning(f"    Found {len(invalid):,} rows with negative values")
            for col, count in per_column.items():
                if count:
                    logger.warning(f"      - {col}: {count:,}")

        return invalid

    # =========================================================================
    # C) FINAL INTEGRITY CHECK
    # =========================================================================

    def find_incomplete_rows(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Select rows where any required column is still null.

        Args:
            df: Working copy after default substitution

        Returns:
            Rows with residual nulls, unchanged
        """
        logger.info("  [C] Checking for residual nulls...")

        nulls = df[COLUMNS].isna()
        incomplete = df.loc[nulls.any(axis=1)].copy()

        null_columns = {
            col: int(count) for col, count in nulls.sum().items() if count
        }

        self.results.append(QualityCheckResult(
            check_name='residual_nulls',
            passed=incomplete.empty,
            severity=min(10, len(incomplete)),
            details={
                'incomplete_rows': len(incomplete),
                'null_columns': null_columns
            },
            affected_rows=incomplete.index.tolist()
        ))

        self.metrics['incomplete_rows'] = len(incomplete)

        if incomplete.empty:
            logger.info("    No residual nulls")
        else:
            logger.warning(f"    Found {len(incomplete):,} rows with residual nulls")
            for col, count in null_columns.items():
                logger.warning(f"      - {col}: {count:,}")

        return incomplete

    # =========================================================================
    # D) ADVISORY CHECKS
    # =========================================================================

    def find_blank_species(self, df: pd.DataFrame) -> pd.DataFrame:
        """Rows whose species name is an empty string after trimming."""
        logger.info("  [D] Checking for blank species names...")

        mask = df[SPECIES_NAME].map(
            lambda v: isinstance(v, str) and v.strip() == ''
        ).astype(bool)
        blank = df.loc[mask].copy()

        self.results.append(QualityCheckResult(
            check_name='blank_species',
            passed=blank.empty,
            severity=min(10, len(blank)),
            details={'blank_rows': len(blank)},
            affected_rows=blank.index.tolist()
        ))

        self.metrics['blank_species_rows'] = len(blank)

        if not blank.empty:
            logger.warning(f"    Found {len(blank):,} rows with a blank species name")

        return blank

    def find_unexpected_risk_values(self, df: pd.DataFrame) -> pd.DataFrame:
        """Rows whose overfishing risk is set but not exactly YES or NO."""
        logger.info("  [D] Checking overfishing risk values...")

        risk = df[OVERFISHING_RISK]
        mask = (risk.notna() & ~risk.isin(RISK_VALUES)).astype(bool)
        unexpected = df.loc[mask].copy()

        values = sorted(str(v) for v in unexpected[OVERFISHING_RISK].unique())

        self.results.append(QualityCheckResult(
            check_name='unexpected_risk_values',
            passed=unexpected.empty,
            severity=min(10, len(unexpected)),
            details={
                'unexpected_rows': len(unexpected),
                'values': values[:20]
            },
            affected_rows=unexpected.index.tolist()
        ))

        self.metrics['unexpected_risk_rows'] = len(unexpected)

        if not unexpected.empty:
            logger.warning(
                f"    Found {len(unexpected):,} rows with unexpected risk values: {values[:5]}"
            )

        return unexpected

    def get_results(self) -> List[QualityCheckResult]:
        """Get all quality check results."""
        return self.results

    def get_metrics(self) -> Dict[str, Any]:
        """Get all quality check metrics."""
        return self.metrics

    def log_summary(self) -> None:
        """Log summary of all quality checks."""
        logger.info("=" * 60)
        logger.info("QUALITY CHECK SUMMARY")
        logger.info("=" * 60)

        passed = sum(1 for r in self.results if r.passed)
        failed = len(self.results) - passed

        logger.info(f"Total checks: {len(self.results)}")
        logger.info(f"Passed: {passed}, Failed: {failed}")
        logger.info("=" * 60)
