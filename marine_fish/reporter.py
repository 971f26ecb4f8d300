"""
Report Writer Module
====================
Writes the pipeline outputs to disk.
Outputs: cleaned_marine_fish.csv, report_*.csv, diagnostic_*.csv,
data_quality_summary.json, data_quality_report.md
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if value is pd.NA:
        return None
    return str(value)


class ReportWriter:
    """
    Writes the cleaned dataset, reports and diagnostics.

    Outputs:
    - cleaned_marine_fish.csv: The cleaned working copy
    - report_<name>.csv: One file per aggregate report
    - diagnostic_<name>.csv: One file per diagnostic row set
    - data_quality_summary.json: Machine-readable summary
    - data_quality_report.md: Human-readable report
    """

    CLEANED_FILE = 'cleaned_marine_fish.csv'
    SUMMARY_FILE = 'data_quality_summary.json'
    MARKDOWN_FILE = 'data_quality_report.md'

    # Rows shown per table in the markdown report
    MAX_TABLE_ROWS = 20

    def __init__(self, output_dir: Union[str, Path]):
        """
        Initialize the ReportWriter.

        Args:
            output_dir: Directory to save outputs
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"ReportWriter initialized. Output directory: {self.output_dir}")

    def write_all(self, result: Any) -> Dict[str, str]:
        """
        Write every output file for a pipeline result.

        Args:
            result: PipelineResult from a completed run

        Returns:
            Dictionary mapping output name to file path
        """
        logger.info("=" * 60)
        logger.info("WRITING OUTPUTS")
        logger.info("=" * 60)

        output_files: Dict[str, str] = {}

        output_files['cleaned'] = str(self._write_csv(result.working_copy, self.CLEANED_FILE))

        for name, report in result.reports.items():
            output_files[f'report_{name}'] = str(
                self._write_csv(report, f'report_{name}.csv')
            )

        for name, frame in result.diagnostics().items():
            output_files[f'diagnostic_{name}'] = str(
                self._write_csv(frame, f'diagnostic_{name}.csv')
            )

        output_files['json'] = str(self._write_json_summary(result))
        output_files['markdown'] = str(self._write_markdown_report(result))

        logger.info(f"Outputs written to: {self.output_dir}")

        return output_files

    def _write_csv(self, df: pd.DataFrame, filename: str) -> Path:
        output_path = self.output_dir / filename
        df.to_csv(output_path, index=False)
        logger.info(f"  Generated: {output_path}")
        return output_path

    def _write_json_summary(self, result: Any) -> Path:
        """Generate data_quality_summary.json."""
        null_audit = {}
        if not result.null_audit.empty:
            null_audit = {
                col: int(count) for col, count in result.null_audit.iloc[0].items()
            }

        summary = {
            'generated_at': datetime.now().isoformat(),
            'source': result.source_name,
            'row_counts': result.row_counts,
            'normalization': result.normalizer_stats,
            'null_audit': null_audit,
            'defaults_filled': result.filled,
            'findings': {
                name: len(frame) for name, frame in result.diagnostics().items()
                if name != 'null_audit'
            },
            'checks': [
                {
                    'check_name': check.check_name,
                    'passed': check.passed,
                    'severity': check.severity,
                    'details': check.details
                }
                for check in result.checks
            ],
            'reports': {
                name: len(report) for name, report in result.reports.items()
            }
        }

        output_path = self.output_dir / self.SUMMARY_FILE
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, default=_json_default)

        logger.info(f"  Generated: {output_path}")
        return output_path

    def _write_markdown_report(self, result: Any) -> Path:
        """Generate data_quality_report.md - human-readable report."""

        output_path = self.output_dir / self.MARKDOWN_FILE

        lines: List[str] = []

        # Header
        lines.append("# Marine Fish Data Quality Report")
        lines.append("")
        lines.append(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append(f"**Source:** {result.source_name}")
        lines.append("")

        # Dataset Overview
        lines.append("## Dataset Overview")
        lines.append("")
        lines.append("| Table | Rows |")
        lines.append("|-------|------|")
        for name, count in result.row_counts.items():
            lines.append(f"| {name.replace('_', ' ').title()} | {count:,} |")
        lines.append("")

        # Cleaning
        lines.append("## Cleaning")
        lines.append("")
        trimmed = result.normalizer_stats.get('trimmed_values', {})
        lines.append(f"- **Values trimmed:** {sum(trimmed.values()):,}")
        converted = result.normalizer_stats.get('float_columns_converted', [])
        lines.append(
            f"- **Columns converted to float:** {', '.join(converted) if converted else 'none'}"
        )
        for col, count in result.filled.items():
            lines.append(f"- **{col} defaults filled:** {count:,}")
        lines.append("")

        lines.append("### Null Audit (before defaults)")
        lines.append("")
        lines.extend(self._table(result.null_audit))
        lines.append("")

        # Quality Check Results
        lines.append("## Quality Check Results")
        lines.append("")
        for check in result.checks:
            status = "PASS" if check.passed else "FAIL"
            lines.append(f"### {check.check_name.replace('_', ' ').title()}: {status}")
            lines.append("")
            lines.append(f"- **Affected rows:** {len(check.affected_rows):,}")
            lines.append("")

        for name, frame in result.diagnostics().items():
            if name == 'null_audit' or frame.empty:
                continue
            lines.append(f"### Findings: {name.replace('_', ' ').title()}")
            lines.append("")
            lines.extend(self._table(frame))
            lines.append("")

        # Reports
        lines.append("## Population Reports")
        lines.append("")
        for name, report in result.reports.items():
            lines.append(f"### {name.replace('_', ' ').title()}")
            lines.append("")
            lines.extend(self._table(report))
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append("*Findings are for review only; no rows were removed.*")

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(lines))

        logger.info(f"  Generated: {output_path}")
        return output_path

    def _table(self, df: pd.DataFrame) -> List[str]:
        """Render a DataFrame as markdown table lines."""
        if df.empty:
            return ["_No rows._"]

        columns = [str(c) for c in df.columns]
        lines = [
            "| " + " | ".join(columns) + " |",
            "|" + "|".join("---" for _ in columns) + "|",
        ]

        for row in df.head(self.MAX_TABLE_ROWS).itertuples(index=False):
            cells = []
            for value in row:
                if pd.isna(value):
                    cells.append("NULL")
                elif isinstance(value, (float, np.floating)):
                    cells.append(f"{value:,.2f}")
                else:
                    cells.append(str(value))
            lines.append("| " + " | ".join(cells) + " |")

        if len(df) > self.MAX_TABLE_ROWS:
            lines.append(f"_...and {len(df) - self.MAX_TABLE_ROWS:,} more rows_")

        return lines
