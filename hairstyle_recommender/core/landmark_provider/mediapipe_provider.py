"""
MediaPipe based landmark provider.

FaceMesh supplies the 468-point mesh (converted to 68 points) and
FaceDetection supplies the detection score, since FaceMesh itself does
not report a per-face confidence.
"""

import math
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np

from hairstyle_recommender.models import Detection, LandmarkSet
from hairstyle_recommender.utils import get_config, get_logger

from .base import LandmarkProvider
from .landmark_mapping import convert_mediapipe_to_68, get_face_bbox

logger = get_logger(__name__)

ScoredBox = Tuple[float, Tuple[float, float, float, float]]


class MediaPipeLandmarkProvider(LandmarkProvider):
    """MediaPipe FaceMesh + FaceDetection 기반 68점 랜드마크 검출기"""

    name = "mediapipe"

    def __init__(self,
                 static_image_mode: Optional[bool] = None,
                 max_num_faces: Optional[int] = None,
                 min_detection_confidence: Optional[float] = None,
                 min_tracking_confidence: Optional[float] = None,
                 model_selection: Optional[int] = None):
        """
        Args:
            static_image_mode: 정적 이미지 모드 (None이면 config)
            max_num_faces: 최대 검출 얼굴 수
            min_detection_confidence: MediaPipe 내부 최소 검출 신뢰도
            min_tracking_confidence: 최소 추적 신뢰도
            model_selection: FaceDetection 모델 (0: 근거리, 1: 원거리)
        """
        super().__init__()
        config = get_config()

        def _pick(value, key, default):
            return value if value is not None else config.get(f'detection.{key}', default)

        self.static_image_mode = _pick(static_image_mode, 'static_image_mode', True)
        self.max_num_faces = _pick(max_num_faces, 'max_num_faces', 1)
        self.min_detection_confidence = _pick(min_detection_confidence, 'min_detection_confidence', 0.5)
        self.min_tracking_confidence = _pick(min_tracking_confidence, 'min_tracking_confidence', 0.5)
        self.model_selection = _pick(model_selection, 'model_selection', 1)

        self.face_mesh = None
        self.face_detection = None

    def _load(self) -> None:
        import mediapipe as mp

        self.face_mesh = mp.solutions.face_mesh.FaceMesh(
            static_image_mode=self.static_image_mode,
            max_num_faces=self.max_num_faces,
            min_detection_confidence=self.min_detection_confidence,
            min_tracking_confidence=self.min_tracking_confidence
        )
        self.face_detection = mp.solutions.face_detection.FaceDetection(
            model_selection=self.model_selection,
            min_detection_confidence=self.min_detection_confidence
        )
        logger.info(f"MediaPipe FaceMesh initialized (max_faces={self.max_num_faces})")

    def _detect(self, image: np.ndarray) -> List[Detection]:
        # Grayscale → BGR 변환
        if len(image.shape) == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        elif image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

        # BGR → RGB 변환 (MediaPipe 요구사항)
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        h, w = image.shape[:2]

        mesh_results = self.face_mesh.process(image_rgb)
        if not mesh_results.multi_face_landmarks:
            logger.debug("No faces detected by MediaPipe")
            return []

        scored_boxes = self._scored_boxes(self.face_detection.process(image_rgb), w, h)

        detections = []
        for face_landmarks in mesh_results.multi_face_landmarks:
            points = convert_mediapipe_to_68(face_landmarks.landmark, w, h)
            bbox = get_face_bbox(face_landmarks.landmark, w, h)
            score = match_detection_score(bbox, scored_boxes)

            detections.append(Detection(
                score=score,
                landmarks=LandmarkSet(points),
                bounding_box=(bbox['x_min'], bbox['y_min'], bbox['width'], bbox['height']),
            ))

        logger.debug(f"Detected {len(detections)} face(s), scores={[round(d.score, 2) for d in detections]}")
        return detections

    @staticmethod
    def _scored_boxes(results, img_width: int, img_height: int) -> List[ScoredBox]:
        """FaceDetection 결과를 (score, (x, y, w, h)) 픽셀 박스 리스트로 변환"""
        boxes = []
        for det in results.detections or []:
            box = det.location_data.relative_bounding_box
            boxes.append((
                float(det.score[0]),
                (box.xmin * img_width, box.ymin * img_height, box.width * img_width, box.height * img_height),
            ))
        return boxes

    def _close(self) -> None:
        if self.face_mesh is not None:
            self.face_mesh.close()
        if self.face_detection is not None:
            self.face_detection.close()
        self.face_mesh = None
        self.face_detection = None


def match_detection_score(bbox: dict, scored_boxes: Sequence[ScoredBox]) -> float:
    """
    메시 바운딩 박스 중심에 가장 가까운 FaceDetection 박스의 점수 반환.

    FaceDetection이 얼굴을 확인하지 못하면 0.0 (저신뢰도로 처리됨).
    """
    if not scored_boxes:
        return 0.0

    cx = bbox['x_min'] + bbox['width'] / 2
    cy = bbox['y_min'] + bbox['height'] / 2

    def center_distance(item: ScoredBox) -> float:
        x, y, bw, bh = item[1]
        return math.hypot(x + bw / 2 - cx, y + bh / 2 - cy)

    score, _ = min(scored_boxes, key=center_distance)
    return min(1.0, max(0.0, score))
