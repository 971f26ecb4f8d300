"""
Pipeline Errors
===============
Fatal error types raised by the marine fish cleaning pipeline.
Data quality findings are never raised; they are returned as DataFrames.
"""

from typing import Any, Optional


class MarineFishError(Exception):
    """Base class for all pipeline errors."""


class SourceUnavailable(MarineFishError):
    """The input dataset cannot be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Source unavailable: {source} ({reason})")


class SchemaMismatch(MarineFishError):
    """The input columns or column types do not match the expected schema."""

    def __init__(self, message: str, missing=None, unexpected=None):
        self.missing = list(missing or [])
        self.unexpected = list(unexpected or [])
        super().__init__(message)


class PipelineStageError(MarineFishError):
    """
    A stage after loading failed.

    Attributes:
        stage: Name of the stage that failed
        partial_result: PipelineResult holding everything computed so far
    """

    def __init__(
        self,
        stage: str,
        partial_result: Optional[Any] = None,
        cause: Optional[BaseException] = None
    ):
        self.stage = stage
        self.partial_result = partial_result
        message = f"Pipeline stage '{stage}' failed"
        if cause is not None:
            message += f": {cause!r}"
        super().__init__(message)
