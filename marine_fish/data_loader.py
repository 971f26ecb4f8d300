"""
Data Loader Module
==================
Handles ingestion of the marine fish dataset from a CSV file or an
already loaded DataFrame. Keeps the source untouched and hands out a
separate working copy for cleaning.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd
from pandas.api.types import is_numeric_dtype

from .errors import SchemaMismatch, SourceUnavailable
from .schema import COLUMNS, FISH_POPULATION, FLOAT_COLUMNS, TEXT_COLUMNS

logger = logging.getLogger(__name__)


class FishDataLoader:
    """
    Loads the marine fish dataset and creates the working copy.

    Attributes:
        source: Typed, untouched copy of the input dataset
        source_name: File path or logical name of the input
        row_counts: Row counts of the source and the working copy
    """

    DEFAULT_SOURCE_NAME = 'marine_fish_data'

    def __init__(self):
        """Initialize the FishDataLoader."""
        self.source: Optional[pd.DataFrame] = None
        self.source_name: Optional[str] = None
        self.row_counts: Dict[str, int] = {}

    def load(self, source: Union[str, Path, pd.DataFrame]) -> pd.DataFrame:
        """
        Load from a CSV path or a DataFrame.

        Args:
            source: Path to a CSV file, or a pre-loaded DataFrame

        Returns:
            The working copy
        """
        if isinstance(source, pd.DataFrame):
            return self.load_frame(source)
        return self.load_csv(source)

    def load_csv(self, path: Union[str, Path]) -> pd.DataFrame:
        """
        Read the dataset from a CSV file.

        Args:
            path: Path to the CSV file

        Returns:
            The working copy

        Raises:
            SourceUnavailable: If the file cannot be read
            SchemaMismatch: If the columns or types are wrong
        """
        path = Path(path)

        if not path.exists():
            logger.error(f"Source file not found: {path}")
            raise SourceUnavailable(str(path), 'file not found')
        if not path.is_file():
            logger.error(f"Source is not a file: {path}")
            raise SourceUnavailable(str(path), 'not a regular file')

        logger.info(f"Loading dataset from {path}...")

        try:
            raw = pd.read_csv(path)
        except pd.errors.EmptyDataError as e:
            raise SourceUnavailable(str(path), 'file is empty') from e
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise SourceUnavailable(str(path), str(e)) from e

        logger.info(f"  Read {len(raw):,} rows from {path.name}")

        return self._stage(raw, str(path))

    def load_frame(
        self,
        frame: pd.DataFrame,
        name: Optional[str] = None
    ) -> pd.DataFrame:
        """
        Take a pre-loaded table as the source. The caller's frame is copied,
        never modified.

        Args:
            frame: DataFrame with the expected columns
            name: Logical name of the source

        Returns:
            The working copy
        """
        name = name or self.DEFAULT_SOURCE_NAME

        if not isinstance(frame, pd.DataFrame):
            raise SourceUnavailable(
                name, f"expected a DataFrame, got {type(frame).__name__}"
            )

        logger.info(f"Loading dataset '{name}' from DataFrame ({len(frame):,} rows)")

        return self._stage(frame.copy(deep=True), name)

    def get_source(self) -> Optional[pd.DataFrame]:
        """
        Get a copy of the untouched source.

        Returns:
            Source DataFrame copy or None if nothing was loaded
        """
        if self.source is None:
            return None
        return self.source.copy(deep=True)

    def get_row_counts(self) -> Dict[str, int]:
        """Get row counts of the source and the working copy."""
        return self.row_counts

    def _stage(self, raw: pd.DataFrame, name: str) -> pd.DataFrame:
        """Validate the schema, type the source and build the working copy."""
        self._check_columns(raw)
        source = self._apply_types(raw)

        working = source.copy(deep=True)
        self._verify_copy(source, working)

        self.source = source
        self.source_name = name
        self.row_counts = {
            'source': len(source),
            'working_copy': len(working)
        }

        self._log_summary()
        return working

    def _check_columns(self, df: pd.DataFrame) -> None:
        """
        Require exactly the expected columns, in source order.

        Raises:
            SchemaMismatch: If a column is missing, unexpected or out of order
        """
        actual = [str(c) for c in df.columns]

        if actual == COLUMNS:
            return

        missing = [c for c in COLUMNS if c not in actual]
        unexpected = [c for c in actual if c not in COLUMNS]

        if missing or unexpected:
            message = (
                f"Column mismatch: missing={missing}, unexpected={unexpected}"
            )
        else:
            message = f"Column order mismatch: expected {COLUMNS}, got {actual}"

        logger.error(message)
        raise SchemaMismatch(message, missing=missing, unexpected=unexpected)

    def _apply_types(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Type the text and numeric columns.

        Text columns are held as object so an all-empty column (read as
        float64) can still take string values. Fish_Population becomes a
        nullable integer; the measurement columns must already be numeric
        or convert cleanly.

        Raises:
            SchemaMismatch: If a numeric column holds non-numeric data
        """
        for col in TEXT_COLUMNS:
            df[col] = df[col].astype(object)

        try:
            population = pd.to_numeric(df[FISH_POPULATION], errors='raise')
            df[FISH_POPULATION] = population.astype('Int64')
        except (ValueError, TypeError) as e:
            message = f"Column '{FISH_POPULATION}' must hold whole numbers: {e}"
            logger.error(message)
            raise SchemaMismatch(message) from e

        for col in FLOAT_COLUMNS:
            if is_numeric_dtype(df[col]):
                continue
            try:
                df[col] = pd.to_numeric(df[col], errors='raise')
            except (ValueError, TypeError) as e:
                message = f"Column '{col}' must be numeric: {e}"
                logger.error(message)
                raise SchemaMismatch(message) from e

        return df

    def _verify_copy(self, source: pd.DataFrame, working: pd.DataFrame) -> None:
        """Check the working copy mirrors the source before any cleaning."""
        if len(working) != len(source) or list(working.columns) != list(source.columns):
            raise SchemaMismatch(
                f"Working copy mismatch: {len(working):,} rows copied "
                f"from {len(source):,}"
            )

    def _log_summary(self) -> None:
        """Log summary of the loaded dataset."""
        logger.info("=" * 60)
        logger.info("DATA LOADING SUMMARY")
        logger.info("=" * 60)
        logger.info(f"SOURCE: {self.source_name}")
        logger.info(f"SOURCE ROWS: {self.row_counts['source']:,}")
        logger.info(f"WORKING COPY ROWS: {self.row_counts['working_copy']:,}")
        logger.info("=" * 60)
