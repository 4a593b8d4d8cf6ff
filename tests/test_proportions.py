"""Tests for proportion calculation, shape classification and metric normalization."""

import math

import pytest

from hairstyle_recommender.core import classify_shape, compute_proportions, compute_ratios, normalize
from hairstyle_recommender.core.metric_normalizer import forehead_width, hairline_position, jawline_strength
from hairstyle_recommender.models import FaceShape, FacialProportions, HairlinePosition, LandmarkSet
from hairstyle_recommender.utils.exceptions import DegenerateGeometryError, InvalidLandmarkSetError

from conftest import build_landmarks


def props(length, width, jaw, forehead):
    return FacialProportions(
        face_length=length, face_width=width, jawline_width=jaw, forehead_area=forehead
    )


class TestComputeProportions:
    def test_distances_from_key_points(self):
        """Length 19-8, width 2-14, jaw 3-13, forehead proxy from 2/14 and 19/30."""
        p = compute_proportions(build_landmarks(length=120, width=100, jaw=85, nose_y=20))

        assert p.face_length == pytest.approx(120.0)
        assert p.face_width == pytest.approx(100.0)
        assert p.jawline_width == pytest.approx(85.0)
        assert p.forehead_area == pytest.approx(math.hypot(100.0, 20.0))

    def test_accepts_point_dicts(self):
        points = [{'x': float(x), 'y': float(y)} for x, y in build_landmarks()]
        p = compute_proportions(points)
        assert p.face_width == pytest.approx(100.0)

    def test_accepts_landmark_set(self):
        landmark_set = LandmarkSet(build_landmarks())
        assert compute_proportions(landmark_set) == compute_proportions(build_landmarks())

    @pytest.mark.parametrize("count", [0, 67, 69, 468])
    def test_wrong_point_count_rejected(self, count):
        """Anything but exactly 68 points is an InvalidLandmarkSet."""
        with pytest.raises(InvalidLandmarkSetError):
            compute_proportions([(0.0, 0.0)] * count)

    def test_non_finite_points_rejected(self):
        points = build_landmarks()
        points[5] = (float('nan'), 1.0)
        with pytest.raises(InvalidLandmarkSetError):
            compute_proportions(points)

    def test_input_is_not_modified(self):
        points = build_landmarks()
        before = points.copy()
        compute_proportions(points)
        assert (points == before).all()

    def test_all_values_non_negative(self):
        p = compute_proportions(build_landmarks(length=80, width=140, jaw=30, nose_y=-10))
        assert min(p.face_length, p.face_width, p.jawline_width, p.forehead_area) >= 0


class TestClassifyShape:
    def test_square_example(self):
        """{120, 100, 85, 30}: ratio 1.2, jaw 0.85 -> square."""
        assert classify_shape(props(120, 100, 85, 30)) is FaceShape.SQUARE

    def test_long_wins_over_square(self):
        """Rule order: length/width 1.4 is long even with a square jaw."""
        assert classify_shape(props(140, 100, 85, 30)) is FaceShape.LONG

    def test_round(self):
        assert classify_shape(props(80, 100, 85, 30)) is FaceShape.ROUND

    def test_heart(self):
        assert classify_shape(props(100, 100, 60, 40)) is FaceShape.HEART

    def test_diamond(self):
        assert classify_shape(props(120, 100, 70, 30)) is FaceShape.DIAMOND

    def test_oval_fallthrough(self):
        assert classify_shape(props(100, 100, 70, 20)) is FaceShape.OVAL

    def test_square_checked_before_heart(self):
        """Forehead ratio 0.5 would be heart, but the square jaw rule comes first."""
        assert classify_shape(props(100, 100, 85, 50)) is FaceShape.SQUARE

    def test_zero_width_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            classify_shape(props(120, 0, 85, 30))

    def test_zero_length_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            classify_shape(props(0, 100, 85, 30))

    def test_ratios(self):
        r = compute_ratios(props(120, 100, 85, 30))
        assert r.length_width_ratio == pytest.approx(1.2)
        assert r.jaw_width_ratio == pytest.approx(0.85)
        assert r.forehead_ratio == pytest.approx(0.25)

    def test_collapsed_landmarks_are_degenerate(self):
        """All 68 points at the same location -> zero width."""
        with pytest.raises(DegenerateGeometryError):
            classify_shape(compute_proportions([(10.0, 10.0)] * 68))


class TestNormalizer:
    def test_jawline_saturates_at_ninety_percent(self):
        assert jawline_strength(props(120, 100, 90, 30)) == pytest.approx(100.0)

    def test_jawline_midrange(self):
        assert jawline_strength(props(120, 100, 70, 30)) == pytest.approx(50.0)

    def test_jawline_clamped_to_zero(self):
        assert jawline_strength(props(120, 100, 40, 30)) == 0.0

    def test_forehead_width_percent(self):
        assert forehead_width(props(120, 100, 85, 30)) == pytest.approx(30.0)

    def test_forehead_width_clamped(self):
        assert forehead_width(props(120, 100, 85, 250)) == 100.0

    @pytest.mark.parametrize("forehead, expected", [
        (50, HairlinePosition.HIGH),
        (30, HairlinePosition.NORMAL),
        (20, HairlinePosition.LOW),
        (40, HairlinePosition.NORMAL),
        (25, HairlinePosition.NORMAL),
        (40.5, HairlinePosition.HIGH),
        (24.5, HairlinePosition.LOW),
    ])
    def test_hairline_position(self, forehead, expected):
        assert hairline_position(props(100, 100, 85, forehead)) is expected

    @pytest.mark.parametrize("jaw, forehead", [(0, 0), (1000, 1000), (85, 30), (55, 5)])
    def test_metrics_within_bounds(self, jaw, forehead):
        metrics = normalize(props(120, 100, jaw, forehead))
        assert 0 <= metrics.jawline_strength <= 100
        assert 0 <= metrics.forehead_width <= 100

    def test_zero_width_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            normalize(props(120, 0, 85, 30))
