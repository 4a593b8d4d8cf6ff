"""Tests for the landmark analysis pipeline and the simplified fallback."""

import numpy as np
import pytest

from hairstyle_recommender.core import FacialAnalyzer, HairstyleRecommender, SimplifiedFaceAnalyzer
from hairstyle_recommender.models import (
    AnalysisType,
    Detection,
    FaceShape,
    FacialProportions,
    HairlinePosition,
    SimplifiedFacialAnalysis,
)
from hairstyle_recommender.utils.exceptions import (
    DegenerateGeometryError,
    InvalidImageError,
    InvalidLandmarkSetError,
    LowConfidenceDetectionError,
    NoFaceDetectedError,
    ProviderNotReadyError,
)

from conftest import MockLandmarkProvider, build_landmarks


class TestAnalyzeLandmarks:
    def test_full_analysis(self, square_landmarks):
        analysis = FacialAnalyzer().analyze_landmarks(square_landmarks, score=0.87)

        assert analysis.face_shape is FaceShape.SQUARE
        assert analysis.jawline_strength == pytest.approx(100.0)
        assert analysis.forehead_width == 100.0
        assert analysis.hairline_position is HairlinePosition.HIGH
        assert analysis.confidence == 87
        assert analysis.analysis_type is AnalysisType.LANDMARK
        assert analysis.raw_landmarks is not None
        assert len(analysis.raw_landmarks) == 68

    def test_drop_landmarks(self, square_landmarks):
        analysis = FacialAnalyzer().analyze_landmarks(square_landmarks, keep_landmarks=False)
        assert analysis.raw_landmarks is None
        assert analysis.confidence == 100

    def test_deterministic(self, square_landmarks):
        analyzer = FacialAnalyzer()
        assert analyzer.analyze_landmarks(square_landmarks) == analyzer.analyze_landmarks(square_landmarks)

    def test_long_face(self):
        analysis = FacialAnalyzer().analyze_landmarks(build_landmarks(length=140, width=100, jaw=85))
        assert analysis.face_shape is FaceShape.LONG

    def test_invalid_landmark_count(self):
        with pytest.raises(InvalidLandmarkSetError):
            FacialAnalyzer().analyze_landmarks(build_landmarks()[:67])

    def test_degenerate_geometry(self):
        with pytest.raises(DegenerateGeometryError):
            FacialAnalyzer().analyze_landmarks(np.zeros((68, 2)))

    def test_to_dict(self, square_landmarks):
        analysis = FacialAnalyzer().analyze_landmarks(square_landmarks)
        data = analysis.to_dict(include_landmarks=True)

        assert data['analysis_type'] == 'landmark'
        assert data['face_shape'] == 'square'
        assert len(data['landmarks']) == 68
        assert 'landmarks' not in analysis.to_dict()


class TestAnalyzeDetections:
    def test_empty_detections(self):
        with pytest.raises(NoFaceDetectedError):
            FacialAnalyzer().analyze_detections([])

    def test_low_confidence(self, square_landmarks):
        with pytest.raises(LowConfidenceDetectionError) as exc_info:
            FacialAnalyzer().analyze_detections([Detection(0.3, square_landmarks)])

        assert exc_info.value.score == pytest.approx(0.3)
        assert exc_info.value.threshold == pytest.approx(0.5)

    def test_threshold_is_inclusive(self, square_landmarks):
        analysis = FacialAnalyzer().analyze_detections([Detection(0.5, square_landmarks)])
        assert analysis.confidence == 50

    def test_first_detection_is_used(self, square_landmarks):
        """Only the first face is analysed, even if a later one scores higher."""
        detections = [
            Detection(0.6, square_landmarks),
            Detection(0.99, build_landmarks(length=140)),
        ]
        analysis = FacialAnalyzer().analyze_detections(detections)

        assert analysis.face_shape is FaceShape.SQUARE
        assert analysis.confidence == 60

    def test_low_confidence_first_is_not_skipped(self, square_landmarks):
        detections = [Detection(0.2, square_landmarks), Detection(0.99, square_landmarks)]
        with pytest.raises(LowConfidenceDetectionError):
            FacialAnalyzer().analyze_detections(detections)

    def test_dict_detections(self, square_landmarks):
        detections = [{
            'score': 0.8,
            'landmarks': [{'x': float(x), 'y': float(y)} for x, y in square_landmarks],
        }]
        analysis = FacialAnalyzer().analyze_detections(detections)
        assert analysis.confidence == 80

    @pytest.mark.parametrize("extra", [
        {'score': 0.9, 'landmarks': [{'x': 0.0, 'y': 0.0}] * 60},
        {'score': 0.9},
        "not a detection",
    ])
    def test_later_detections_are_not_validated(self, square_landmarks, extra):
        first = {'score': 0.7, 'landmarks': [[float(x), float(y)] for x, y in square_landmarks]}
        analysis = FacialAnalyzer().analyze_detections([first, extra])

        assert analysis.face_shape is FaceShape.SQUARE
        assert analysis.confidence == 70

    def test_malformed_first_detection_still_rejected(self, square_landmarks):
        with pytest.raises(InvalidLandmarkSetError):
            FacialAnalyzer().analyze_detections([
                {'score': 0.9, 'landmarks': [{'x': 0.0, 'y': 0.0}] * 60},
                Detection(0.9, square_landmarks),
            ])

    def test_custom_threshold(self, square_landmarks):
        analyzer = FacialAnalyzer(min_detection_score=0.9)
        with pytest.raises(LowConfidenceDetectionError):
            analyzer.analyze_detections([Detection(0.85, square_landmarks)])


class TestAnalyzeImage:
    def test_with_ready_provider(self, square_detection, blank_image):
        provider = MockLandmarkProvider([square_detection])
        provider.load()

        analysis = FacialAnalyzer(provider).analyze_image(blank_image)
        assert analysis.face_shape is FaceShape.SQUARE
        assert analysis.confidence == 92

    def test_provider_not_loaded(self, square_detection, blank_image):
        provider = MockLandmarkProvider([square_detection])
        with pytest.raises(ProviderNotReadyError):
            FacialAnalyzer(provider).analyze_image(blank_image)

    def test_without_provider(self, blank_image):
        with pytest.raises(ProviderNotReadyError):
            FacialAnalyzer().analyze_image(blank_image)

    def test_no_face(self, blank_image):
        with MockLandmarkProvider([]) as provider:
            with pytest.raises(NoFaceDetectedError):
                FacialAnalyzer(provider).analyze_image(blank_image)

    def test_invalid_image(self, square_detection):
        with MockLandmarkProvider([square_detection]) as provider:
            with pytest.raises(InvalidImageError):
                FacialAnalyzer(provider).analyze_image(np.zeros((0, 0, 3), dtype=np.uint8))


class TestSimplifiedAnalyzer:
    @pytest.mark.parametrize("size, shape", [
        ((1000, 1000), FaceShape.DIAMOND),   # 700 / 600 = 1.17
        ((640, 480), FaceShape.ROUND),       # 336 / 384 = 0.875
        ((500, 1000), FaceShape.LONG),       # 700 / 300 = 2.33
        ((1000, 900), FaceShape.OVAL),       # 630 / 600 = 1.05
    ])
    def test_shape_from_aspect_ratio(self, size, shape):
        assert SimplifiedFaceAnalyzer(seed=0).analyze(size).face_shape is shape

    def test_labelled_and_capped(self):
        analysis = SimplifiedFaceAnalyzer(seed=1).analyze((640, 480))

        assert isinstance(analysis, SimplifiedFacialAnalysis)
        assert analysis.analysis_type is AnalysisType.SIMPLIFIED
        assert analysis.is_simplified
        assert analysis.confidence == 40
        assert analysis.raw_landmarks is None
        assert analysis.hairline_position is HairlinePosition.NORMAL

    def test_metric_ranges(self):
        analyzer = SimplifiedFaceAnalyzer(seed=7)
        for _ in range(20):
            analysis = analyzer.analyze((800, 600))
            assert 50 <= analysis.jawline_strength <= 80
            assert 40 <= analysis.forehead_width <= 80

    def test_seed_is_reproducible(self):
        assert SimplifiedFaceAnalyzer(seed=3).analyze((800, 600)) == SimplifiedFaceAnalyzer(seed=3).analyze((800, 600))

    def test_proportions(self):
        p = SimplifiedFaceAnalyzer(seed=0).analyze((1000, 1000)).facial_proportions
        assert p.face_width == pytest.approx(600)
        assert p.face_length == pytest.approx(700)
        assert p.jawline_width == pytest.approx(420)
        assert p.forehead_area == pytest.approx(600 * 700 * 0.2)

    def test_accepts_image(self, blank_image):
        assert SimplifiedFaceAnalyzer(seed=0).analyze(blank_image).face_shape is FaceShape.ROUND

    def test_invalid_size(self):
        with pytest.raises(InvalidImageError):
            SimplifiedFaceAnalyzer().analyze((0, 480))

    def test_confidence_cap_enforced(self):
        with pytest.raises(ValueError):
            SimplifiedFacialAnalysis(
                face_shape=FaceShape.OVAL,
                jawline_strength=60.0,
                forehead_width=60.0,
                hairline_position=HairlinePosition.NORMAL,
                facial_proportions=FacialProportions(100.0, 100.0, 70.0, 20.0),
                confidence=80,
            )

    def test_recommendation_is_labelled(self):
        analysis = SimplifiedFaceAnalyzer(seed=0).analyze((640, 480))
        result = HairstyleRecommender().recommend(analysis)

        assert result.analysis_type == 'simplified'
        assert "simplified estimate" in result.explanation
