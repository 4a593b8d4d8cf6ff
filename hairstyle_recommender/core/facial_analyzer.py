"""
Facial Analyzer
68점 랜드마크 → 비율 → 얼굴형/지표 → FacialAnalysis 파이프라인
"""

import time
from typing import Any, Optional, Sequence

import numpy as np

from hairstyle_recommender.models import Detection, FacialAnalysis, LandmarkSet
from hairstyle_recommender.utils import get_config, get_logger
from hairstyle_recommender.utils.exceptions import (
    LowConfidenceDetectionError,
    NoFaceDetectedError,
    ProviderNotReadyError,
)
from hairstyle_recommender.utils.validators import validate_confidence, validate_image

from .landmark_provider import LandmarkProvider
from .metric_normalizer import normalize
from .proportion_calculator import compute_proportions
from .shape_classifier import classify_shape

logger = get_logger(__name__)


class FacialAnalyzer:
    """
    랜드마크 기반 얼굴 분석기

    부분 결과는 없다: 모든 호출은 완전한 FacialAnalysis를 반환하거나 예외를 던진다.

    Usage:
        with MediaPipeLandmarkProvider() as provider:
            analyzer = FacialAnalyzer(provider)
            analysis = analyzer.analyze_image(image)
    """

    def __init__(self, provider: Optional[LandmarkProvider] = None,
                 min_detection_score: Optional[float] = None):
        """
        Args:
            provider: 이미지 분석에 사용할 랜드마크 provider (랜드마크 직접 입력 시 불필요)
            min_detection_score: 최소 검출 점수 (None이면 config의 detection.min_detection_score)
        """
        if min_detection_score is None:
            min_detection_score = get_config().get('detection.min_detection_score', 0.5)
        validate_confidence(min_detection_score, "min_detection_score")

        self.provider = provider
        self.min_detection_score = float(min_detection_score)

    def analyze_landmarks(self, landmarks: Any, score: float = 1.0,
                          keep_landmarks: bool = True) -> FacialAnalysis:
        """
        68점 랜드마크 분석

        Args:
            landmarks: LandmarkSet 또는 68개 포인트 시퀀스
            score: 검출 점수 (0-1), confidence = round(score * 100)
            keep_landmarks: 결과에 raw_landmarks 포함 여부

        Returns:
            FacialAnalysis

        Raises:
            InvalidLandmarkSetError: 포인트가 68개가 아닌 경우
            DegenerateGeometryError: 얼굴 너비 또는 길이가 0인 경우
        """
        validate_confidence(score, "score")
        landmark_set = LandmarkSet.from_points(landmarks)

        proportions = compute_proportions(landmark_set)
        face_shape = classify_shape(proportions)
        metrics = normalize(proportions)

        analysis = FacialAnalysis(
            face_shape=face_shape,
            jawline_strength=metrics.jawline_strength,
            forehead_width=metrics.forehead_width,
            hairline_position=metrics.hairline_position,
            facial_proportions=proportions,
            confidence=int(round(score * 100)),
            raw_landmarks=landmark_set if keep_landmarks else None,
        )

        logger.info(
            f"Face analysis: shape={face_shape.value}, "
            f"jawline={metrics.jawline_strength:.1f}, forehead={metrics.forehead_width:.1f}, "
            f"hairline={metrics.hairline_position.value}, confidence={analysis.confidence}"
        )
        return analysis

    def analyze_detections(self, detections: Sequence[Any]) -> FacialAnalysis:
        """
        Provider 검출 결과 분석 (첫 번째 얼굴만 사용)

        Args:
            detections: Detection 또는 {'score', 'landmarks'} 딕셔너리 리스트

        Raises:
            NoFaceDetectedError: 검출 결과가 비어 있는 경우
            LowConfidenceDetectionError: 첫 번째 검출 점수가 임계값 미만인 경우
        """
        detections = list(detections)
        if not detections:
            raise NoFaceDetectedError("No face detected in image")

        if len(detections) > 1:
            logger.debug(f"{len(detections)} faces detected, using the first one")

        # 나머지 검출 결과는 변환/검증하지 않는다
        first = detections[0]
        if not isinstance(first, Detection):
            first = Detection.from_dict(first)
        if first.score < self.min_detection_score:
            raise LowConfidenceDetectionError(first.score, self.min_detection_score)

        return self.analyze_landmarks(first.landmarks, score=first.score)

    def analyze_image(self, image: np.ndarray) -> FacialAnalysis:
        """
        이미지 분석 (provider 필요)

        Args:
            image: BGR 이미지 (numpy array)

        Raises:
            ProviderNotReadyError: provider가 없거나 READY 상태가 아닌 경우
            InvalidImageError: 이미지가 유효하지 않은 경우
        """
        if self.provider is None:
            raise ProviderNotReadyError("No landmark provider configured")

        validate_image(image)

        start_time = time.time()
        detections = self.provider.detect(image)
        detect_time = (time.time() - start_time) * 1000
        logger.debug(f"Landmark detection took {detect_time:.2f}ms")

        return self.analyze_detections(detections)

    def __repr__(self):
        provider = self.provider.name if self.provider is not None else None
        return f"FacialAnalyzer(provider={provider}, min_detection_score={self.min_detection_score})"
