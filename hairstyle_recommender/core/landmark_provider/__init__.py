"""Landmark provider abstraction and MediaPipe backend"""

from .base import LandmarkProvider, ProviderState, ProviderStatus
from .landmark_mapping import MEDIAPIPE_TO_68, convert_mediapipe_to_68, get_face_bbox
from .mediapipe_provider import MediaPipeLandmarkProvider, match_detection_score

__all__ = [
    'LandmarkProvider',
    'ProviderState',
    'ProviderStatus',
    'MediaPipeLandmarkProvider',
    'match_detection_score',
    'MEDIAPIPE_TO_68',
    'convert_mediapipe_to_68',
    'get_face_bbox',
]
