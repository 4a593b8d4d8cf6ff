"""얼굴 분석 결과 데이터 모델"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .landmark_models import LandmarkSet

SIMPLIFIED_MAX_CONFIDENCE = 40


class FaceShape(Enum):
    """얼굴형 분류"""
    OVAL = "oval"          # 계란형
    ROUND = "round"        # 둥근형
    SQUARE = "square"      # 사각형
    HEART = "heart"        # 하트형 (넓은 이마)
    LONG = "long"          # 긴형
    DIAMOND = "diamond"    # 다이아몬드형


class HairlinePosition(Enum):
    """헤어라인 위치 (얼굴 길이 대비 이마 비율)"""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class AnalysisType(Enum):
    """분석 경로 구분"""
    LANDMARK = "landmark"        # 랜드마크 모델 기반
    SIMPLIFIED = "simplified"    # 모델 없는 간이 추정 (저신뢰도)


@dataclass(frozen=True)
class FacialProportions:
    """랜드마크에서 계산한 네 가지 거리 값"""

    face_length: float     # 이마 기준점(19) ~ 턱 끝(8)
    face_width: float      # 볼 윤곽(2) ~ (14)
    jawline_width: float   # 턱선(3) ~ (13)
    forehead_area: float   # 너비 x 높이 대용값 (실제 면적 아님)

    def __post_init__(self):
        for name in ('face_length', 'face_width', 'jawline_width', 'forehead_area'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative finite number, got {value}")

    def to_dict(self) -> Dict[str, float]:
        return {
            'face_length': round(self.face_length, 3),
            'face_width': round(self.face_width, 3),
            'jawline_width': round(self.jawline_width, 3),
            'forehead_area': round(self.forehead_area, 3),
        }


@dataclass(frozen=True)
class FacialAnalysis:
    """랜드마크 기반 얼굴 분석 결과 (추천 엔진의 유일한 입력)"""

    face_shape: FaceShape
    jawline_strength: float            # 0-100
    forehead_width: float              # 0-100
    hairline_position: HairlinePosition
    facial_proportions: FacialProportions
    confidence: int                    # 0-100
    raw_landmarks: Optional[LandmarkSet] = field(default=None, compare=False)
    analysis_type: AnalysisType = field(default=AnalysisType.LANDMARK, init=False)

    def __post_init__(self):
        for name in ('jawline_strength', 'forehead_width', 'confidence'):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")

    @property
    def is_simplified(self) -> bool:
        return self.analysis_type is AnalysisType.SIMPLIFIED

    def to_dict(self, include_landmarks: bool = False) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        result = {
            'analysis_type': self.analysis_type.value,
            'face_shape': self.face_shape.value,
            'jawline_strength': round(self.jawline_strength, 1),
            'forehead_width': round(self.forehead_width, 1),
            'hairline_position': self.hairline_position.value,
            'facial_proportions': self.facial_proportions.to_dict(),
            'confidence': self.confidence,
        }
        if include_landmarks and self.raw_landmarks is not None:
            result['landmarks'] = self.raw_landmarks.to_list()
        return result


@dataclass(frozen=True)
class SimplifiedFacialAnalysis(FacialAnalysis):
    """
    모델 없이 이미지 크기만으로 추정한 간이 분석 결과.

    랜드마크 기반 결과와 섞이지 않도록 analysis_type이 SIMPLIFIED로 고정되고
    신뢰도는 SIMPLIFIED_MAX_CONFIDENCE 이하로 제한된다.
    """

    analysis_type: AnalysisType = field(default=AnalysisType.SIMPLIFIED, init=False)

    def __post_init__(self):
        super().__post_init__()
        if self.confidence > SIMPLIFIED_MAX_CONFIDENCE:
            raise ValueError(
                f"Simplified analysis confidence must be <= {SIMPLIFIED_MAX_CONFIDENCE}, got {self.confidence}"
            )
        if self.raw_landmarks is not None:
            raise ValueError("Simplified analysis does not carry landmarks")
