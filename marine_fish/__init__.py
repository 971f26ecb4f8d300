# Marine Fish Data Cleaning Pipeline
# Core modules for cleaning and analyzing the marine fish dataset

from .data_loader import FishDataLoader
from .errors import MarineFishError, PipelineStageError, SchemaMismatch, SourceUnavailable
from .missing_values import MissingValueHandler
from .normalizer import DataNormalizer
from .pipeline import CleaningPipeline, PipelineResult, run_pipeline
from .quality_checks import QualityChecker, QualityCheckResult
from .reporter import ReportWriter
from .reports import PopulationReports

__all__ = [
    'FishDataLoader',
    'DataNormalizer',
    'MissingValueHandler',
    'QualityChecker',
    'QualityCheckResult',
    'PopulationReports',
    'ReportWriter',
    'CleaningPipeline',
    'PipelineResult',
    'run_pipeline',
    'MarineFishError',
    'SourceUnavailable',
    'SchemaMismatch',
    'PipelineStageError',
]
