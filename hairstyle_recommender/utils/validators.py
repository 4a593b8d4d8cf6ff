"""입력 검증 유틸리티 함수"""

import numpy as np
from typing import Any, Sequence

from .exceptions import InvalidImageError, InvalidLandmarkSetError

NUM_LANDMARKS = 68


def validate_image(image: np.ndarray) -> None:
    """
    이미지 유효성 검증

    Args:
        image: 검증할 이미지 (numpy array)

    Raises:
        InvalidImageError: 이미지가 유효하지 않은 경우
    """
    if image is None:
        raise InvalidImageError("Image is None")

    if not isinstance(image, np.ndarray):
        raise InvalidImageError(f"Image must be numpy.ndarray, got {type(image)}")

    if image.size == 0:
        raise InvalidImageError("Image is empty")

    if len(image.shape) not in [2, 3]:
        raise InvalidImageError(f"Image must be 2D or 3D, got shape {image.shape}")

    if len(image.shape) == 3 and image.shape[2] not in [1, 3, 4]:
        raise InvalidImageError(f"Image channels must be 1, 3, or 4, got {image.shape[2]}")


def validate_confidence(confidence: float, param_name: str = "confidence") -> None:
    """신뢰도 값 검증 (0.0 ~ 1.0)"""
    if not 0.0 <= confidence <= 1.0:
        raise ValueError(f"{param_name} must be between 0.0 and 1.0, got {confidence}")


def _point_to_xy(point: Any) -> tuple:
    """(x, y) 튜플, {'x','y'} 딕셔너리, .x/.y 속성 객체를 모두 허용"""
    if isinstance(point, dict):
        return point['x'], point['y']
    if hasattr(point, 'x') and hasattr(point, 'y'):
        return point.x, point.y
    x, y = point
    return x, y


def points_to_array(points: Sequence[Any], expected: int = NUM_LANDMARKS) -> np.ndarray:
    """
    랜드마크 포인트 시퀀스를 (expected, 2) float 배열로 변환

    Args:
        points: 포인트 시퀀스 또는 (N, 2) 배열
        expected: 요구되는 포인트 개수 (기본 68)

    Returns:
        np.ndarray: (expected, 2) shape의 float64 배열

    Raises:
        InvalidLandmarkSetError: 개수 또는 형식이 맞지 않는 경우
    """
    if points is None:
        raise InvalidLandmarkSetError("Landmark set is None")

    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidLandmarkSetError(f"Landmark array must have shape (N, 2), got {points.shape}")
        array = points.astype(np.float64)
    else:
        try:
            array = np.array([_point_to_xy(p) for p in points], dtype=np.float64)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidLandmarkSetError(f"Malformed landmark point: {e}") from e
        if array.size == 0:
            array = array.reshape(0, 2)

    if array.shape[0] != expected:
        raise InvalidLandmarkSetError(f"Expected {expected} landmarks, got {array.shape[0]}")

    if not np.all(np.isfinite(array)):
        raise InvalidLandmarkSetError("Landmark coordinates must be finite numbers")

    return array
