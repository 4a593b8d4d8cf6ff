"""68점 랜드마크로부터 얼굴 비율 측정값 계산"""

import math
from typing import Any

from hairstyle_recommender.models import FacialProportions, LandmarkSet, Point
from hairstyle_recommender.utils import get_logger

from .constants import FACE_SHAPE_LANDMARKS

logger = get_logger(__name__)


def _distance(p1: Point, p2: Point) -> float:
    """두 포인트 사이의 유클리드 거리"""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def compute_proportions(landmarks: Any) -> FacialProportions:
    """
    얼굴 길이 / 너비 / 턱선 너비 / 이마 면적 대용값 계산

    Args:
        landmarks: LandmarkSet 또는 68개 포인트 시퀀스

    Returns:
        FacialProportions

    Raises:
        InvalidLandmarkSetError: 포인트가 정확히 68개가 아닌 경우

    Note:
        forehead_area는 볼 윤곽 가로폭과 코끝~이마 기준점 세로폭의 hypot이다.
        실제 다각형 면적이 아니지만 분류 임계값이 이 값에 맞춰져 있다.
    """
    landmark_set = LandmarkSet.from_points(landmarks)

    forehead = landmark_set[FACE_SHAPE_LANDMARKS['forehead_reference']]
    chin = landmark_set[FACE_SHAPE_LANDMARKS['chin']]
    cheek_left = landmark_set[FACE_SHAPE_LANDMARKS['cheek_left']]
    cheek_right = landmark_set[FACE_SHAPE_LANDMARKS['cheek_right']]
    jaw_left = landmark_set[FACE_SHAPE_LANDMARKS['jaw_left']]
    jaw_right = landmark_set[FACE_SHAPE_LANDMARKS['jaw_right']]
    nose_tip = landmark_set[FACE_SHAPE_LANDMARKS['nose_tip']]

    face_length = _distance(forehead, chin)
    face_width = _distance(cheek_left, cheek_right)
    jawline_width = _distance(jaw_left, jaw_right)
    forehead_area = math.hypot(cheek_right.x - cheek_left.x, nose_tip.y - forehead.y)

    logger.debug(
        f"Proportions: length={face_length:.1f}, width={face_width:.1f}, "
        f"jaw={jawline_width:.1f}, forehead={forehead_area:.1f}"
    )

    return FacialProportions(
        face_length=face_length,
        face_width=face_width,
        jawline_width=jawline_width,
        forehead_area=forehead_area,
    )
