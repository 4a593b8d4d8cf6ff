"""
MediaPipe 468-point to 68-point landmark mapping.

Converts MediaPipe Face Mesh output into the 68-point convention the
proportion calculator expects (8 = chin, 19 = brow reference, 30 = nose tip).
"""

import numpy as np
from typing import Dict, List

# MediaPipe → 68점 매핑 테이블 (리스트 위치 = 68점 인덱스)
MEDIAPIPE_TO_68: List[int] = [
    # 얼굴 윤곽 (Jaw line) 0-16, 8 = 턱 끝
    127, 234, 93, 132, 58, 172, 136, 150, 152, 377, 365, 397, 288, 361, 323, 454, 356,
    # 눈썹 (Eyebrows) 17-26
    70, 63, 105, 66, 107,
    336, 296, 334, 293, 300,
    # 코 (Nose) 27-35, 30 = 코끝
    168, 6, 197, 4,
    98, 97, 2, 326, 327,
    # 눈 (Eyes) 36-47, 36/45 = 바깥 눈꼬리
    33, 160, 158, 133, 153, 144,
    362, 385, 387, 263, 373, 380,
    # 입 (Mouth) 48-67
    61, 39, 37, 0, 267, 269, 291, 405, 314, 17, 84, 181,
    78, 82, 13, 312, 308, 317, 14, 87,
]


def convert_mediapipe_to_68(mediapipe_landmarks, img_width: int, img_height: int) -> np.ndarray:
    """
    MediaPipe 468점 랜드마크를 68점 형식으로 변환.

    Args:
        mediapipe_landmarks: MediaPipe face_landmarks.landmark (정규화 좌표 0.0-1.0)
        img_width: 이미지 너비 (픽셀)
        img_height: 이미지 높이 (픽셀)

    Returns:
        np.ndarray: (68, 2) shape의 픽셀 좌표 (x, y)
    """
    points = []

    for mp_idx in MEDIAPIPE_TO_68:
        lm = mediapipe_landmarks[mp_idx]
        points.append([lm.x * img_width, lm.y * img_height])

    return np.array(points, dtype=np.float64)


def get_face_bbox(mediapipe_landmarks, img_width: int, img_height: int) -> Dict[str, int]:
    """
    MediaPipe 랜드마크에서 얼굴 바운딩 박스 계산.

    Args:
        mediapipe_landmarks: MediaPipe face_landmarks.landmark
        img_width: 이미지 너비
        img_height: 이미지 높이

    Returns:
        dict: {'x_min', 'y_min', 'x_max', 'y_max', 'width', 'height'}
    """
    x_coords = [lm.x * img_width for lm in mediapipe_landmarks]
    y_coords = [lm.y * img_height for lm in mediapipe_landmarks]

    x_min = int(min(x_coords))
    y_min = int(min(y_coords))
    x_max = int(max(x_coords))
    y_max = int(max(y_coords))

    return {
        'x_min': x_min,
        'y_min': y_min,
        'x_max': x_max,
        'y_max': y_max,
        'width': x_max - x_min,
        'height': y_max - y_min
    }
