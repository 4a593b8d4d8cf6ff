"""
Hairstyle Recommender
68점 얼굴 랜드마크 기반 얼굴형 분석 및 규칙 기반 헤어스타일 추천
"""

__version__ = "0.1.0"

from .models import (
    FaceShape,
    FacialAnalysis,
    FacialProportions,
    HairlinePosition,
    HairstyleRecommendation,
    LandmarkSet,
    RecommendedStyle,
    SimplifiedFacialAnalysis,
)
from .catalog import get_catalog, load_catalog
from .core import (
    FacialAnalyzer,
    HairstyleRecommender,
    MediaPipeLandmarkProvider,
    SimplifiedFaceAnalyzer,
    classify_shape,
    compute_proportions,
    normalize,
    recommend,
)

__all__ = [
    '__version__',
    'FaceShape', 'FacialAnalysis', 'FacialProportions', 'HairlinePosition',
    'HairstyleRecommendation', 'LandmarkSet', 'RecommendedStyle', 'SimplifiedFacialAnalysis',
    'get_catalog', 'load_catalog',
    'FacialAnalyzer', 'HairstyleRecommender', 'MediaPipeLandmarkProvider', 'SimplifiedFaceAnalyzer',
    'classify_shape', 'compute_proportions', 'normalize', 'recommend',
]
