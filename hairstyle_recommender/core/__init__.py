"""
Core analysis modules: proportions, shape classification, normalization,
recommendation and landmark providers.
"""
from .proportion_calculator import compute_proportions
from .shape_classifier import ShapeRatios, classify_shape, compute_ratios
from .metric_normalizer import NormalizedMetrics, normalize
from .recommendation_engine import HairstyleRecommender, get_styling_advice, recommend
from .facial_analyzer import FacialAnalyzer
from .simplified_analyzer import SimplifiedFaceAnalyzer
from .landmark_provider import (
    LandmarkProvider,
    MediaPipeLandmarkProvider,
    ProviderState,
    ProviderStatus,
)

__all__ = [
    'compute_proportions',
    'ShapeRatios', 'classify_shape', 'compute_ratios',
    'NormalizedMetrics', 'normalize',
    'HairstyleRecommender', 'recommend', 'get_styling_advice',
    'FacialAnalyzer', 'SimplifiedFaceAnalyzer',
    'LandmarkProvider', 'MediaPipeLandmarkProvider', 'ProviderState', 'ProviderStatus',
]
