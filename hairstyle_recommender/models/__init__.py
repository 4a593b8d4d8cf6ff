"""
Data models for facial analysis and hairstyle recommendation.
"""
from .landmark_models import Point, LandmarkSet, Detection
from .analysis_models import (
    FaceShape,
    HairlinePosition,
    AnalysisType,
    FacialProportions,
    FacialAnalysis,
    SimplifiedFacialAnalysis,
    SIMPLIFIED_MAX_CONFIDENCE,
)
from .catalog_models import (
    HairCategory,
    ForeheadTolerance,
    StyleTag,
    HairstyleCatalogEntry,
    RecommendedStyle,
    HairstyleRecommendation,
)

__all__ = [
    'Point', 'LandmarkSet', 'Detection',
    'FaceShape', 'HairlinePosition', 'AnalysisType',
    'FacialProportions', 'FacialAnalysis', 'SimplifiedFacialAnalysis',
    'SIMPLIFIED_MAX_CONFIDENCE',
    'HairCategory', 'ForeheadTolerance', 'StyleTag',
    'HairstyleCatalogEntry', 'RecommendedStyle', 'HairstyleRecommendation',
]
