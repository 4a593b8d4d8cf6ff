"""비율 기반 얼굴형 분류"""

from dataclasses import dataclass

from hairstyle_recommender.models import FaceShape, FacialProportions
from hairstyle_recommender.utils import get_logger
from hairstyle_recommender.utils.exceptions import DegenerateGeometryError

from . import constants as C

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShapeRatios:
    """분류에 사용하는 세 가지 비율"""

    length_width_ratio: float   # face_length / face_width
    jaw_width_ratio: float      # jawline_width / face_width
    forehead_ratio: float       # forehead_area / face_length


def compute_ratios(proportions: FacialProportions) -> ShapeRatios:
    """
    얼굴 비율 계산

    Raises:
        DegenerateGeometryError: face_width 또는 face_length가 0인 경우
    """
    if proportions.face_width == 0:
        raise DegenerateGeometryError("face_width is zero")
    if proportions.face_length == 0:
        raise DegenerateGeometryError("face_length is zero")

    return ShapeRatios(
        length_width_ratio=proportions.face_length / proportions.face_width,
        jaw_width_ratio=proportions.jawline_width / proportions.face_width,
        forehead_ratio=proportions.forehead_area / proportions.face_length,
    )


def classify_shape(proportions: FacialProportions) -> FaceShape:
    """
    얼굴형 분류. 규칙이 서로 겹치므로 평가 순서 자체가 결과를 결정한다.

    1. length/width > 1.3                    → LONG
    2. length/width < 0.9                    → ROUND
    3. |jaw/width - 0.85| < 0.1              → SQUARE
    4. forehead/length > 0.35                → HEART
    5. jaw/width < 0.8 and length/width > 1.1 → DIAMOND
    6. 그 외                                 → OVAL

    Args:
        proportions: FacialProportions

    Returns:
        FaceShape
    """
    ratios = compute_ratios(proportions)
    lw = ratios.length_width_ratio
    jw = ratios.jaw_width_ratio

    if lw > C.LONG_RATIO_MIN:
        shape = FaceShape.LONG
    elif lw < C.ROUND_RATIO_MAX:
        shape = FaceShape.ROUND
    elif abs(jw - C.SQUARE_JAW_RATIO) < C.SQUARE_JAW_TOLERANCE:
        shape = FaceShape.SQUARE
    elif ratios.forehead_ratio > C.HEART_FOREHEAD_RATIO_MIN:
        shape = FaceShape.HEART
    elif jw < C.DIAMOND_JAW_RATIO_MAX and lw > C.DIAMOND_RATIO_MIN:
        shape = FaceShape.DIAMOND
    else:
        shape = FaceShape.OVAL

    logger.debug(
        f"Shape ratios: length/width={lw:.3f}, jaw/width={jw:.3f}, "
        f"forehead/length={ratios.forehead_ratio:.3f} -> {shape.value}"
    )
    return shape
