"""랜드마크 / 검출 결과 데이터 모델"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from hairstyle_recommender.utils.validators import NUM_LANDMARKS, points_to_array, validate_confidence


@dataclass(frozen=True)
class Point:
    """단일 2D 랜드마크 포인트 (픽셀 좌표)"""

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}


class LandmarkSet:
    """
    68점 얼굴 랜드마크 (불변)

    인덱스 의미는 위치 기반이며 재정렬하면 안 된다.
    (8 = 턱 끝, 19 = 이마 기준점, 2/14 = 볼 윤곽, 3/13 = 턱선, 30 = 코끝, 36/45 = 눈꼬리)
    """

    __slots__ = ('_points',)

    def __init__(self, points: np.ndarray):
        array = points_to_array(points, NUM_LANDMARKS)
        array.setflags(write=False)
        self._points = array

    @classmethod
    def from_points(cls, points: Any) -> "LandmarkSet":
        """
        다양한 형식의 포인트 시퀀스로부터 LandmarkSet 생성

        Args:
            points: (x, y) 튜플, {'x','y'} 딕셔너리, .x/.y 속성 객체의 시퀀스 또는 (68, 2) 배열

        Raises:
            InvalidLandmarkSetError: 68개가 아니거나 형식이 잘못된 경우
        """
        if isinstance(points, cls):
            return points
        return cls(points)

    @property
    def array(self) -> np.ndarray:
        """읽기 전용 (68, 2) 배열"""
        return self._points

    def point(self, index: int) -> Point:
        x, y = self._points[index]
        return Point(float(x), float(y))

    def __getitem__(self, index: int) -> Point:
        return self.point(index)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        for i in range(len(self._points)):
            yield self.point(i)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LandmarkSet):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    def __hash__(self) -> int:
        return hash(self._points.tobytes())

    def to_list(self) -> List[Dict[str, float]]:
        return [p.to_dict() for p in self]

    def __repr__(self):
        return f"LandmarkSet(num_points={len(self)})"


@dataclass(frozen=True)
class Detection:
    """Landmark provider가 반환하는 얼굴 하나의 검출 결과"""

    score: float                  # 검출 신뢰도 (0-1)
    landmarks: LandmarkSet
    bounding_box: Optional[Tuple[int, int, int, int]] = None  # (x, y, w, h)

    def __post_init__(self):
        validate_confidence(self.score, "score")
        if not isinstance(self.landmarks, LandmarkSet):
            object.__setattr__(self, 'landmarks', LandmarkSet.from_points(self.landmarks))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Detection":
        """{'score': float, 'landmarks': [{'x','y'}, ...]} 형식에서 생성"""
        bbox = data.get('bounding_box')
        return cls(
            score=float(data['score']),
            landmarks=LandmarkSet.from_points(data['landmarks']),
            bounding_box=tuple(bbox) if bbox is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'landmarks': self.landmarks.to_list(),
            'bounding_box': list(self.bounding_box) if self.bounding_box else None,
        }
