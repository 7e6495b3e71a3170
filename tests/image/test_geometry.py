"""
Tests for image.geometry module.

Tests contour extraction and shape measurements.
"""

import cv2
import numpy as np
import pytest

from cvfacade.common.enums import ContourApproximation, RetrievalMode
from cvfacade.exceptions import UnsupportedOptionError
from cvfacade.image.geometry import (
    arc_length,
    bounding_rect,
    centroid,
    contour_area,
    contour_properties,
    find_contours,
    min_enclosing_circle,
    moments,
)


@pytest.fixture
def nested_squares():
    """Binary image with a hollow square (outer and inner boundary)"""
    image = np.zeros((100, 100), dtype=np.uint8)
    image[10:90, 10:90] = 255
    image[30:70, 30:70] = 0
    return image


class TestFindContours:
    """Tests for find_contours function."""

    def test_single_square(self, binary_square):
        """Test a filled square yields one four-corner contour."""
        contours = find_contours(binary_square)

        assert isinstance(contours, list)
        assert len(contours) == 1
        # CHAIN_APPROX_SIMPLE keeps only the corners
        assert contours[0].shape == (4, 1, 2)

    def test_approximation_none_keeps_all_points(self, binary_square):
        """Test approximation 'none' keeps every boundary point."""
        contours = find_contours(binary_square, method=ContourApproximation.NONE)

        assert len(contours[0]) > 4

    def test_list_mode_returns_all_levels(self, nested_squares):
        """Test list mode returns outer and inner boundaries."""
        assert len(find_contours(nested_squares, mode="list")) == 2

    def test_external_mode_returns_outer_only(self, nested_squares):
        """Test external mode skips nested boundaries."""
        contours = find_contours(nested_squares, mode=RetrievalMode.EXTERNAL)

        assert len(contours) == 1
        assert bounding_rect(contours[0]) == (10, 10, 80, 80)

    def test_raw_flags_accepted(self, nested_squares):
        """Test raw OpenCV flags pass through."""
        contours = find_contours(nested_squares, cv2.RETR_TREE, cv2.CHAIN_APPROX_SIMPLE)

        assert len(contours) == 2

    def test_empty_image(self):
        """Test an empty image yields no contours."""
        assert find_contours(np.zeros((10, 10), dtype=np.uint8)) == []

    def test_source_not_modified(self, nested_squares):
        """Test extraction leaves the caller's image unchanged."""
        original = nested_squares.copy()

        find_contours(nested_squares, mode="tree")

        np.testing.assert_array_equal(nested_squares, original)

    def test_unknown_mode(self, binary_square):
        """Test unknown retrieval mode names raise."""
        with pytest.raises(UnsupportedOptionError):
            find_contours(binary_square, mode="outermost")

    def test_unsupported_depth_raises(self):
        """Test unsupported image types surface the OpenCV error."""
        with pytest.raises(cv2.error):
            find_contours(np.zeros((10, 10), dtype=np.float32))


class TestContourArea:
    """Tests for contour_area function."""

    def test_unit_square(self, unit_square):
        """Test unit square area is 1 in either direction."""
        assert contour_area(unit_square) == pytest.approx(1.0)
        assert contour_area(unit_square[::-1].copy()) == pytest.approx(1.0)

    def test_oriented_sign(self, unit_square):
        """Test oriented area sign follows traversal direction."""
        assert contour_area(unit_square, oriented=True) == pytest.approx(1.0)
        assert contour_area(unit_square[::-1].copy(), oriented=True) == pytest.approx(-1.0)

    def test_returns_float(self, binary_square):
        """Test area is a Python float."""
        area = contour_area(find_contours(binary_square)[0])

        assert isinstance(area, float)
        assert area == pytest.approx(39 * 39)


class TestMeasurements:
    """Tests for arc_length, bounding_rect and min_enclosing_circle."""

    def test_arc_length_closed_and_open(self, unit_square):
        """Test closed curves include the closing segment."""
        assert arc_length(unit_square) == pytest.approx(4.0)
        assert arc_length(unit_square, closed=False) == pytest.approx(3.0)

    def test_bounding_rect(self, binary_square):
        """Test bounding rectangle of the square contour."""
        contour = find_contours(binary_square)[0]

        assert bounding_rect(contour) == (30, 30, 40, 40)

    def test_enclosing_circle_right_triangle(self):
        """Test 3-4-5 triangle circle sits on the hypotenuse midpoint."""
        points = np.array([[0, 0], [3, 0], [0, 4]], dtype=np.float32)

        (cx, cy), radius = min_enclosing_circle(points)

        assert radius == pytest.approx(2.5, abs=1e-3)
        assert cx == pytest.approx(1.5, abs=1e-3)
        assert cy == pytest.approx(2.0, abs=1e-3)

    def test_enclosing_circle_contains_points(self):
        """Test every input point lies within the circle."""
        rng = np.random.default_rng(7)
        points = rng.uniform(0, 100, size=(50, 2)).astype(np.float32)

        (cx, cy), radius = min_enclosing_circle(points)

        distances = np.hypot(points[:, 0] - cx, points[:, 1] - cy)
        assert np.all(distances <= radius + 1e-3)


class TestMoments:
    """Tests for moments and centroid functions."""

    def test_polygon_moments(self, unit_square):
        """Test polygon moments give area and centroid."""
        m = moments(unit_square)

        assert m["m00"] == pytest.approx(1.0)
        assert centroid(m) == pytest.approx((0.5, 0.5))

    def test_raster_moments(self, binary_square):
        """Test raster moments of the square image."""
        m = moments(binary_square, binary_image=True)

        assert m["m00"] == pytest.approx(40 * 40)
        assert centroid(m) == pytest.approx((49.5, 49.5))

    def test_binary_flag(self, binary_square):
        """Test binary_image treats non-zero pixels as 1."""
        weighted = moments(binary_square)
        binary = moments(binary_square, binary_image=True)

        assert weighted["m00"] == pytest.approx(binary["m00"] * 255)

    def test_contains_central_moments(self, unit_square):
        """Test central and normalized moments are present."""
        m = moments(unit_square)

        for key in ("mu20", "mu11", "mu02", "mu30", "nu20", "nu03"):
            assert key in m

    def test_centroid_zero_area(self):
        """Test centroid of an empty shape is None."""
        m = moments(np.zeros((10, 10), dtype=np.uint8))

        assert centroid(m) is None


class TestContourProperties:
    """Tests for contour_properties function."""

    def test_square_properties(self, binary_square):
        """Test properties of the square contour."""
        contour = find_contours(binary_square)[0]

        props = contour_properties(contour)

        assert props["area"] == pytest.approx(39 * 39)
        assert props["perimeter"] == pytest.approx(4 * 39)
        assert props["center"] == pytest.approx((49.5, 49.5))
        assert props["bounding_box"] == (30, 30, 40, 40)
        (cx, cy), radius = props["enclosing_circle"]
        assert radius == pytest.approx(39 * np.sqrt(2) / 2, abs=1e-2)
