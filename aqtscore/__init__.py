"""
AQT Score - bullet hole detection and scoring for paper shooting targets.
"""

from .config import DEFAULT_CONFIG, load_config, merge_config
from .core import TargetAnalyzer, analyze
from .scoring.zones import SCORING_PRESETS, ScoreZone, scoring_preset
from .types import AnalysisResult, DetectedHole, InvalidImage, TargetCenter

__all__ = [
    'analyze',
    'TargetAnalyzer',
    'AnalysisResult',
    'DetectedHole',
    'TargetCenter',
    'ScoreZone',
    'InvalidImage',
    'DEFAULT_CONFIG',
    'SCORING_PRESETS',
    'load_config',
    'merge_config',
    'scoring_preset',
]
__version__ = '1.0.0'
