"""
Cleaning Pipeline
=================
Runs the stages in order against one working copy:

    load -> normalize -> duplicates -> missing values -> ranges
         -> integrity -> reports

Any failure after loading stops the run and raises PipelineStageError
carrying the partial result. The source is never modified.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from .data_loader import FishDataLoader
from .errors import PipelineStageError
from .missing_values import MissingValueHandler
from .normalizer import DataNormalizer
from .quality_checks import QualityChecker, QualityCheckResult
from .reporter import ReportWriter
from .reports import PopulationReports

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything a pipeline run produced, complete or partial."""
    source: Optional[pd.DataFrame] = None
    working_copy: Optional[pd.DataFrame] = None
    source_name: Optional[str] = None
    row_counts: Dict[str, int] = field(default_factory=dict)
    normalizer_stats: Dict[str, Any] = field(default_factory=dict)
    null_audit: pd.DataFrame = field(default_factory=pd.DataFrame)
    filled: Dict[str, int] = field(default_factory=dict)
    duplicates: pd.DataFrame = field(default_factory=pd.DataFrame)
    out_of_range: pd.DataFrame = field(default_factory=pd.DataFrame)
    incomplete_rows: pd.DataFrame = field(default_factory=pd.DataFrame)
    blank_species: pd.DataFrame = field(default_factory=pd.DataFrame)
    unexpected_risk_values: pd.DataFrame = field(default_factory=pd.DataFrame)
    checks: List[QualityCheckResult] = field(default_factory=list)
    reports: Dict[str, pd.DataFrame] = field(default_factory=dict)
    output_files: Dict[str, str] = field(default_factory=dict)
    completed_stages: List[str] = field(default_factory=list)

    def diagnostics(self) -> Dict[str, pd.DataFrame]:
        """Diagnostic row sets, keyed by name."""
        return {
            'null_audit': self.null_audit,
            'duplicates': self.duplicates,
            'out_of_range': self.out_of_range,
            'incomplete_rows': self.incomplete_rows,
            'blank_species': self.blank_species,
            'unexpected_risk_values': self.unexpected_risk_values,
        }

    @property
    def has_findings(self) -> bool:
        return any(
            not frame.empty
            for name, frame in self.diagnostics().items()
            if name != 'null_audit'
        )


class CleaningPipeline:
    """
    Sequential cleaning and reporting pipeline for the marine fish dataset.

    Attributes:
        output_dir: Where to write outputs, or None to skip writing
        result: PipelineResult of the current or last run
    """

    STAGES = (
        'normalize',
        'duplicates',
        'missing_values',
        'range_validation',
        'integrity',
        'reports',
        'write_outputs',
    )

    def __init__(self, output_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the pipeline.

        Args:
            output_dir: Directory for output files (None: keep results in memory)
        """
        self.output_dir = output_dir
        self.loader = FishDataLoader()
        self.normalizer = DataNormalizer()
        self.missing = MissingValueHandler()
        self.checker = QualityChecker()
        self.reporter = PopulationReports()
        self.result = PipelineResult()

    def run(self, source: Union[str, Path, pd.DataFrame]) -> PipelineResult:
        """
        Run the complete pipeline.

        Args:
            source: CSV path or pre-loaded DataFrame

        Returns:
            PipelineResult

        Raises:
            SourceUnavailable: If the source cannot be read
            SchemaMismatch: If the source has the wrong columns or types
            PipelineStageError: If any later stage fails
        """
        logger.info("=" * 70)
        logger.info("MARINE FISH CLEANING PIPELINE")
        logger.info("=" * 70)

        self.result = PipelineResult()

        # =====================================================================
        # STEP 1: LOAD (fatal errors propagate unchanged)
        # =====================================================================
        logger.info("STEP 1: Loading dataset...")

        working = self.loader.load(source)

        self.result.source = self.loader.source
        self.result.working_copy = working
        self.result.source_name = self.loader.source_name
        self.result.row_counts = dict(self.loader.get_row_counts())
        self.result.completed_stages.append('load')

        # =====================================================================
        # STEPS 2-7
        # =====================================================================
        for number, stage in enumerate(self.STAGES, start=2):
            if stage == 'write_outputs' and self.output_dir is None:
                continue

            logger.info(f"\nSTEP {number}: {stage.replace('_', ' ').title()}...")

            try:
                getattr(self, f'_stage_{stage}')(working)
            except Exception as e:
                logger.error(f"Stage '{stage}' failed: {e}")
                raise PipelineStageError(stage, self.result, cause=e) from e

            self.result.completed_stages.append(stage)

        self.result.row_counts['working_copy'] = len(working)
        self._log_summary()

        return self.result

    def _stage_normalize(self, df: pd.DataFrame) -> None:
        self.normalizer.normalize(df)
        self.result.normalizer_stats = self.normalizer.get_stats()

    def _stage_duplicates(self, df: pd.DataFrame) -> None:
        self.result.duplicates = self.checker.find_duplicates(df)

    def _stage_missing_values(self, df: pd.DataFrame) -> None:
        self.result.null_audit = self.missing.audit(df)
        self.result.filled = self.missing.remediate(df)

    def _stage_range_validation(self, df: pd.DataFrame) -> None:
        self.result.out_of_range = self.checker.find_out_of_range(df)

    def _stage_integrity(self, df: pd.DataFrame) -> None:
        self.result.incomplete_rows = self.checker.find_incomplete_rows(df)
        self.result.blank_species = self.checker.find_blank_species(df)
        self.result.unexpected_risk_values = self.checker.find_unexpected_risk_values(df)
        self.result.checks = self.checker.get_results()
        self.checker.log_summary()

    def _stage_reports(self, df: pd.DataFrame) -> None:
        self.result.reports = self.reporter.generate_all(df)

    def _stage_write_outputs(self, df: pd.DataFrame) -> None:
        writer = ReportWriter(self.output_dir)
        self.result.output_files = writer.write_all(self.result)

    def _log_summary(self) -> None:
        metrics = self.checker.get_metrics()

        logger.info("")
        logger.info("=" * 70)
        logger.info("PIPELINE COMPLETE")
        logger.info("=" * 70)
        logger.info(f"Rows in working copy: {self.result.row_counts['working_copy']:,}")
        logger.info(f"Duplicate groups: {metrics.get('duplicate_groups', 0):,}")
        logger.info(f"Out-of-range rows: {metrics.get('out_of_range_rows', 0):,}")
        logger.info(f"Rows with residual nulls: {metrics.get('incomplete_rows', 0):,}")

        if self.result.output_files:
            logger.info("")
            logger.info("Output Files:")
            for name, path in self.result.output_files.items():
                logger.info(f"  - {name}: {path}")
        logger.info("=" * 70)


def run_pipeline(
    source: Union[str, Path, pd.DataFrame],
    output_dir: Optional[Union[str, Path]] = None
) -> PipelineResult:
    """
    Run the complete cleaning pipeline.

    Args:
        source: CSV path or pre-loaded DataFrame
        output_dir: Directory to save output files (None: don't write)

    Returns:
        PipelineResult
    """
    return CleaningPipeline(output_dir).run(source)
