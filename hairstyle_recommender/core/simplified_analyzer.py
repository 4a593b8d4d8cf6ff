"""
Simplified (model-free) facial analysis fallback.

Used when the landmark provider cannot be loaded or analysis fails.
This is a placeholder heuristic: the face is assumed to fill a fixed share
of the frame and the remaining metrics are jittered around typical values.
Results are always SimplifiedFacialAnalysis with capped confidence.
"""
from typing import Optional, Tuple, Union

import numpy as np

from hairstyle_recommender.models import (
    FaceShape,
    FacialProportions,
    HairlinePosition,
    SimplifiedFacialAnalysis,
    SIMPLIFIED_MAX_CONFIDENCE,
)
from hairstyle_recommender.utils import get_config, get_logger
from hairstyle_recommender.utils.exceptions import InvalidImageError
from hairstyle_recommender.utils.validators import validate_image

from . import constants as C

logger = get_logger(__name__)


class SimplifiedFaceAnalyzer:
    """이미지 크기만으로 얼굴형을 추정하는 저신뢰도 분석기"""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 난수 시드 (테스트 재현용)
        """
        config = get_config()
        self.face_width_ratio = config.get('fallback.face_width_ratio', 0.6)
        self.face_length_ratio = config.get('fallback.face_length_ratio', 0.7)
        self.confidence = min(int(config.get('fallback.confidence', SIMPLIFIED_MAX_CONFIDENCE)),
                              SIMPLIFIED_MAX_CONFIDENCE)
        self.rng = np.random.default_rng(seed)

    @staticmethod
    def _image_size(image_or_size: Union[np.ndarray, Tuple[int, int]]) -> Tuple[int, int]:
        """ndarray면 (w, h) 추출, 튜플이면 (width, height)로 간주"""
        if isinstance(image_or_size, np.ndarray):
            validate_image(image_or_size)
            h, w = image_or_size.shape[:2]
            return int(w), int(h)

        width, height = image_or_size
        if width <= 0 or height <= 0:
            raise InvalidImageError(f"Image size must be positive, got {width}x{height}")
        return int(width), int(height)

    def _estimate_shape(self, length_width_ratio: float) -> FaceShape:
        # 종횡비만 사용 (턱/이마 정보 없음)
        if length_width_ratio > C.LONG_RATIO_MIN:
            return FaceShape.LONG
        elif length_width_ratio < C.ROUND_RATIO_MAX:
            return FaceShape.ROUND
        elif length_width_ratio > C.DIAMOND_RATIO_MIN:
            return FaceShape.DIAMOND
        return FaceShape.OVAL

    def analyze(self, image_or_size: Union[np.ndarray, Tuple[int, int]]) -> SimplifiedFacialAnalysis:
        """
        간이 분석 수행

        Args:
            image_or_size: BGR 이미지 또는 (width, height)

        Returns:
            SimplifiedFacialAnalysis (analysis_type=SIMPLIFIED, confidence <= 40)
        """
        width, height = self._image_size(image_or_size)

        face_width = width * self.face_width_ratio
        face_length = height * self.face_length_ratio
        face_shape = self._estimate_shape(face_length / face_width)

        proportions = FacialProportions(
            face_length=face_length,
            face_width=face_width,
            jawline_width=face_width * 0.7,
            forehead_area=face_width * face_length * 0.2,
        )

        analysis = SimplifiedFacialAnalysis(
            face_shape=face_shape,
            jawline_strength=float(50 + self.rng.random() * 30),   # 50-80
            forehead_width=float(40 + self.rng.random() * 40),     # 40-80
            hairline_position=HairlinePosition.NORMAL,
            facial_proportions=proportions,
            confidence=self.confidence,
        )

        logger.warning(
            f"Using simplified analysis for {width}x{height} image: "
            f"{face_shape.value} (confidence {self.confidence})"
        )
        return analysis
