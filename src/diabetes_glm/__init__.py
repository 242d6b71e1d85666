"""
Logistic regression analysis of the Pima Indians diabetes data
"""

from .config import AnalysisConfig, PlotStyle, ReferenceLevel
from .data_loader import DataLoader
from .data_cleaner import DataCleaner
from .splitter import DataSplitter
from .analyzer import StatisticalAnalyzer
from .model_fitter import GLMFitter, FittedModel
from .predictor import Predictor
from .evaluator import ClassificationEvaluator, RocCurve
from .visualizer import Visualizer
from .pipeline import run_pipeline
from .exceptions import PipelineError, DataError, FittingError

__all__ = [
    'AnalysisConfig',
    'PlotStyle',
    'ReferenceLevel',
    'DataLoader',
    'DataCleaner',
    'DataSplitter',
    'StatisticalAnalyzer',
    'GLMFitter',
    'FittedModel',
    'Predictor',
    'ClassificationEvaluator',
    'RocCurve',
    'Visualizer',
    'run_pipeline',
    'PipelineError',
    'DataError',
    'FittingError',
]
