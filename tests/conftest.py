"""Shared test fixtures: synthetic landmark sets, analyses and a mock provider."""

import numpy as np
import pytest

from hairstyle_recommender.core.landmark_provider import LandmarkProvider
from hairstyle_recommender.models import (
    Detection,
    FaceShape,
    FacialAnalysis,
    FacialProportions,
    ForeheadTolerance,
    HairCategory,
    HairlinePosition,
    HairstyleCatalogEntry,
)


def build_landmarks(length=120.0, width=100.0, jaw=85.0, nose_y=20.0):
    """
    Build a (68, 2) landmark array with known distances.

    forehead reference (19) at the origin, chin (8) straight below it,
    cheek outline (2/14) and jaw (3/13) centred on the vertical axis.
    """
    points = np.tile([0.0, length / 2], (68, 1))
    points[19] = (0.0, 0.0)
    points[8] = (0.0, length)
    points[2] = (-width / 2, length * 0.3)
    points[14] = (width / 2, length * 0.3)
    points[3] = (-jaw / 2, length * 0.6)
    points[13] = (jaw / 2, length * 0.6)
    points[30] = (0.0, nose_y)
    return points


def make_analysis(shape=FaceShape.OVAL, jawline=50.0, forehead=50.0,
                  hairline=HairlinePosition.NORMAL, confidence=90):
    return FacialAnalysis(
        face_shape=shape,
        jawline_strength=jawline,
        forehead_width=forehead,
        hairline_position=hairline,
        facial_proportions=FacialProportions(120.0, 100.0, 85.0, 30.0),
        confidence=confidence,
    )


def make_entry(style_id="1", name="Test Style", category=HairCategory.MEDIUM,
               shapes=(FaceShape.OVAL,), threshold=50.0,
               tolerance=ForeheadTolerance.ALL, tags=()):
    return HairstyleCatalogEntry(
        id=style_id,
        name=name,
        category=category,
        compatible_shapes=frozenset(shapes),
        jawline_required_threshold=threshold,
        forehead_tolerance=tolerance,
        style_tags=frozenset(tags),
    )


class MockLandmarkProvider(LandmarkProvider):
    """Provider returning canned detections."""

    name = "mock"

    def __init__(self, detections=None, fail_with=None):
        super().__init__()
        self._detections = detections or []
        self._fail_with = fail_with
        self.load_calls = 0
        self.state_during_load = None
        self.closed = False

    def _load(self):
        self.load_calls += 1
        self.state_during_load = self.state
        if self._fail_with is not None:
            raise self._fail_with

    def _detect(self, image):
        return list(self._detections)

    def _close(self):
        self.closed = True


@pytest.fixture
def square_landmarks():
    return build_landmarks(length=120.0, width=100.0, jaw=85.0)


@pytest.fixture
def square_detection(square_landmarks):
    return Detection(score=0.92, landmarks=square_landmarks)


@pytest.fixture
def blank_image():
    return np.zeros((480, 640, 3), dtype=np.uint8)
