"""헤어스타일 카탈로그 / 추천 결과 데이터 모델"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .analysis_models import FaceShape


class HairCategory(Enum):
    """헤어스타일 카테고리"""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FADE = "fade"
    CURLY = "curly"


class ForeheadTolerance(Enum):
    """스타일이 어울리는 이마 너비 범위"""
    ALL = "all"
    WIDE = "wide"
    NORMAL = "normal"


class StyleTag(Enum):
    """스타일 특징 태그 (이름 문자열 매칭 대신 사용)"""
    SIDE_PART = "side_part"
    QUIFF = "quiff"
    POMPADOUR = "pompadour"
    SLICKED = "slicked"
    TEXTURED = "textured"
    CROPPED = "cropped"
    FADE = "fade"
    UNDERCUT = "undercut"
    LAYERED = "layered"
    TIED = "tied"
    CURLY = "curly"


@dataclass(frozen=True)
class HairstyleCatalogEntry:
    """카탈로그의 헤어스타일 하나 (프로세스 수명 동안 읽기 전용)"""

    id: str
    name: str
    category: HairCategory
    compatible_shapes: FrozenSet[FaceShape]
    jawline_required_threshold: float
    forehead_tolerance: ForeheadTolerance
    style_tags: FrozenSet[StyleTag] = frozenset()
    descriptive_notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category.value,
            'compatible_shapes': sorted(s.value for s in self.compatible_shapes),
            'jawline_required_threshold': self.jawline_required_threshold,
            'forehead_tolerance': self.forehead_tolerance.value,
            'style_tags': sorted(t.value for t in self.style_tags),
            'descriptive_notes': self.descriptive_notes,
        }


@dataclass(frozen=True)
class RecommendedStyle:
    """추천 결과 한 건"""

    style_id: str
    name: str
    category: HairCategory
    match_score: int                        # 0-100 정수
    reasons_for_match: Tuple[str, ...] = ()
    suggested_color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'style_id': self.style_id,
            'name': self.name,
            'category': self.category.value,
            'match_score': self.match_score,
            'reasons_for_match': list(self.reasons_for_match),
            'suggested_color': self.suggested_color,
        }


@dataclass(frozen=True)
class HairstyleRecommendation:
    """추천 엔진 전체 출력"""

    top_recommendations: Tuple[RecommendedStyle, ...]
    suggested_color: str
    explanation: str
    analysis_type: str = field(default="landmark")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'top_recommendations': [r.to_dict() for r in self.top_recommendations],
            'suggested_color': self.suggested_color,
            'explanation': self.explanation,
            'analysis_type': self.analysis_type,
        }
