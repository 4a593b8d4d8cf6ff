"""얼굴 비율을 0-100 점수 및 헤어라인 구간으로 변환"""

from dataclasses import dataclass

from hairstyle_recommender.models import FacialProportions, HairlinePosition
from hairstyle_recommender.utils.exceptions import DegenerateGeometryError

from . import constants as C


@dataclass(frozen=True)
class NormalizedMetrics:
    jawline_strength: float
    forehead_width: float
    hairline_position: HairlinePosition


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def _percent(numerator: float, denominator: float, name: str) -> float:
    if denominator == 0:
        raise DegenerateGeometryError(f"{name} is zero")
    return numerator / denominator * 100


def jawline_strength(proportions: FacialProportions) -> float:
    """턱선 강도: (jaw/width*100 - 60) * 5, 0-100 클램프 (90% 이상이면 100)"""
    jawline_ratio = _percent(proportions.jawline_width, proportions.face_width, "face_width")
    return _clamp((jawline_ratio - C.JAWLINE_RATIO_OFFSET) * C.JAWLINE_RATIO_GAIN)


def forehead_width(proportions: FacialProportions) -> float:
    """이마 너비: forehead/width*100, 0-100 클램프"""
    return _clamp(_percent(proportions.forehead_area, proportions.face_width, "face_width"))


def hairline_position(proportions: FacialProportions) -> HairlinePosition:
    """이마 / 얼굴 길이 비율로 헤어라인 위치 판정"""
    forehead_ratio = _percent(proportions.forehead_area, proportions.face_length, "face_length")

    if forehead_ratio > C.HAIRLINE_HIGH_MIN:
        return HairlinePosition.HIGH
    elif forehead_ratio < C.HAIRLINE_LOW_MAX:
        return HairlinePosition.LOW
    return HairlinePosition.NORMAL


def normalize(proportions: FacialProportions) -> NormalizedMetrics:
    return NormalizedMetrics(
        jawline_strength=jawline_strength(proportions),
        forehead_width=forehead_width(proportions),
        hairline_position=hairline_position(proportions),
    )
