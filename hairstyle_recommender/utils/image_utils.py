# -*- coding: utf-8 -*-
"""
Image loading and landmark visualization helpers
"""

from pathlib import Path
from typing import Tuple

import cv2
import numpy as np

from hairstyle_recommender.core.constants import FACE_OUTLINE, JAWLINE, KEY_LANDMARK_INDICES

from .exceptions import InvalidImageError
from .logging_config import get_logger

logger = get_logger(__name__)

POINT_COLOR: Tuple[int, int, int] = (0, 255, 0)
KEY_POINT_COLOR: Tuple[int, int, int] = (0, 0, 255)
OUTLINE_COLOR: Tuple[int, int, int] = (255, 200, 0)
JAWLINE_COLOR: Tuple[int, int, int] = (0, 165, 255)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)


def load_image(image_path: str) -> np.ndarray:
    """
    이미지 파일을 BGR 배열로 로드

    cv2.imread 대신 바이트를 직접 읽어 decode하므로 비 ASCII 경로에서도 동작한다.

    Args:
        image_path: 이미지 경로

    Returns:
        numpy array (BGR 포맷)

    Raises:
        InvalidImageError: 파일이 없거나 디코딩할 수 없는 경우
    """
    path = Path(image_path)
    if not path.is_file():
        raise InvalidImageError(f"Image not found: {image_path}")

    buffer = np.fromfile(str(path), dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)

    if image is None:
        raise InvalidImageError(f"Could not read image or image is corrupted: {image_path}")

    logger.debug(f"Loaded image {path.name}: {image.shape[1]}x{image.shape[0]}")
    return image


def draw_landmarks(image: np.ndarray, analysis) -> np.ndarray:
    """
    분석 결과 시각화 (원본은 수정하지 않음)

    - 68점 전체를 점으로, 주요 포인트는 번호와 함께 표시
    - 얼굴 윤곽(0-16)과 턱선(3-12)을 선으로 연결
    - 좌상단에 얼굴형 / 신뢰도 표시

    Args:
        image: BGR 이미지
        analysis: FacialAnalysis (raw_landmarks가 없으면 텍스트만 표시)

    Returns:
        시각화된 BGR 이미지
    """
    canvas = image.copy()
    if len(canvas.shape) == 2:
        canvas = cv2.cvtColor(canvas, cv2.COLOR_GRAY2BGR)

    landmarks = analysis.raw_landmarks
    if landmarks is not None:
        points = np.round(landmarks.array).astype(np.int32)

        outline = points[list(FACE_OUTLINE)].reshape(-1, 1, 2)
        cv2.polylines(canvas, [outline], False, OUTLINE_COLOR, 1, cv2.LINE_AA)

        jawline = points[list(JAWLINE)].reshape(-1, 1, 2)
        cv2.polylines(canvas, [jawline], False, JAWLINE_COLOR, 2, cv2.LINE_AA)

        for idx, (x, y) in enumerate(points):
            if idx in KEY_LANDMARK_INDICES:
                cv2.circle(canvas, (int(x), int(y)), 4, KEY_POINT_COLOR, -1)
                cv2.putText(canvas, str(idx), (int(x) + 5, int(y) - 5),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.4, KEY_POINT_COLOR, 1)
            else:
                cv2.circle(canvas, (int(x), int(y)), 2, POINT_COLOR, -1)

    title = f"{analysis.face_shape.value.upper()} ({analysis.analysis_type.value})"
    cv2.putText(canvas, title, (15, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.9, TEXT_COLOR, 2)
    cv2.putText(canvas, f"Confidence: {analysis.confidence}", (15, 60),
                cv2.FONT_HERSHEY_SIMPLEX, 0.6, TEXT_COLOR, 1)

    return canvas


def save_image(image: np.ndarray, output_path: str) -> None:
    """
    이미지 저장 (비 ASCII 경로 지원)

    Raises:
        InvalidImageError: 인코딩 실패
    """
    suffix = Path(output_path).suffix or '.png'
    ok, encoded = cv2.imencode(suffix, image)
    if not ok:
        raise InvalidImageError(f"Could not encode image as {suffix}")

    encoded.tofile(output_path)
    logger.info(f"Visualization saved to: {output_path}")
