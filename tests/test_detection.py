"""Tests for detection module."""

import pytest
import numpy as np
import cv2
from aqtscore.detection.circle_detector import CircleDetector, detect_circles
from aqtscore.detection.center_estimator import CENTER_POLICIES, CenterEstimator
from aqtscore.preprocessing.enhancement import ImagePreprocessor
from aqtscore.types import DetectedHole, InvalidImage, TargetCenter
from aqtscore.utils.metrics import AccuracyMetrics


def make_target(size=(480, 640), holes=(), radius=15):
    """White sheet with black filled discs standing in for bullet holes."""
    image = np.full((size[0], size[1], 3), 255, dtype=np.uint8)
    for x, y in holes:
        cv2.circle(image, (x, y), radius, (0, 0, 0), -1)
    return image


class TestCircleDetector:
    """Test circle detection."""
    
    def test_circle_detector_initialization(self):
        """Test CircleDetector defaults."""
        detector = CircleDetector()
        assert detector.dp == 1.2
        assert detector.min_dist == 20
        assert detector.param1 == 100.0
        assert detector.param2 == 30.0
        assert detector.min_radius == 5
        assert detector.max_radius == 40

    def test_circle_detector_custom_params(self):
        """Test CircleDetector with custom parameters."""
        detector = CircleDetector(dp=1.0, min_dist=30, param2=20.0, min_radius=3, max_radius=25)
        assert detector.params == {
            'dp': 1.0, 'min_dist': 30, 'param1': 100.0,
            'param2': 20.0, 'min_radius': 3, 'max_radius': 25,
        }

    @pytest.mark.parametrize('params', [
        {'dp': 0},
        {'min_dist': 0},
        {'param1': 0},
        {'param1': -100.0},
        {'param2': 0},
        {'param2': -30.0},
        {'min_radius': -1},
        {'min_radius': 30, 'max_radius': 10},
    ])
    def test_invalid_params(self, params):
        """Test invalid parameters are rejected."""
        with pytest.raises(ValueError):
            CircleDetector(**params)

    def test_blank_image_has_no_circles(self):
        """Test that an empty sheet yields an empty list."""
        detector = CircleDetector()
        blank = np.full((480, 640), 255, dtype=np.uint8)
        assert detector.detect(blank) == []

    def test_detect_synthetic_holes(self):
        """Test detection of clean dark discs."""
        truth = [(150, 150), (400, 200), (300, 350)]
        image = make_target(holes=truth)
        filtered = ImagePreprocessor().preprocess(image)

        holes = CircleDetector().detect(filtered)
        assert all(isinstance(h, DetectedHole) for h in holes)

        counts = AccuracyMetrics.match_holes([(h.x, h.y) for h in holes], truth, max_distance=5)
        assert counts['true_positives'] == 3

    def test_detected_radius_in_range(self):
        """Test detected radii respect the configured range."""
        image = make_target(holes=[(200, 200), (450, 300)], radius=20)
        filtered = ImagePreprocessor().preprocess(image)

        holes = CircleDetector().detect(filtered)
        assert holes
        for hole in holes:
            assert 5 <= hole.radius <= 40

    def test_values_are_python_floats(self):
        """Test coordinates are plain floats."""
        image = make_target(holes=[(320, 240)])
        holes = CircleDetector().detect(ImagePreprocessor().preprocess(image))
        assert holes
        assert type(holes[0].x) is float
        assert type(holes[0].radius) is float

    def test_detection_is_deterministic(self):
        """Test identical input gives identical output."""
        image = ImagePreprocessor().preprocess(make_target(holes=[(150, 150), (400, 200)]))
        assert CircleDetector().detect(image) == CircleDetector().detect(image.copy())

    def test_rejects_color_image(self):
        """Test that detection needs a single channel."""
        with pytest.raises(InvalidImage):
            CircleDetector().detect(np.zeros((100, 100, 3), dtype=np.uint8))

    def test_detect_circles_function(self):
        """Test the functional interface."""
        image = ImagePreprocessor().preprocess(make_target(holes=[(320, 240)]))
        holes = detect_circles(image, {'min_radius': 5, 'max_radius': 40})
        assert len(holes) >= 1
        assert detect_circles(np.full((100, 100), 255, dtype=np.uint8)) == []

    def test_detect_circles_rejects_zero_thresholds(self):
        """Test the functional interface checks thresholds before running Hough."""
        image = np.full((100, 100), 255, dtype=np.uint8)
        with pytest.raises(ValueError):
            detect_circles(image, {'param2': 0})
        with pytest.raises(ValueError):
            detect_circles(image, {'param1': 0})


class TestCenterEstimator:
    """Test scoring origin estimation."""

    def test_image_center(self):
        """Test the default policy returns the frame center."""
        image = np.zeros((480, 640, 3), dtype=np.uint8)
        assert CenterEstimator().estimate(image) == TargetCenter(320.0, 240.0)

    def test_odd_dimensions(self):
        """Test the center is not truncated for odd sizes."""
        image = np.zeros((51, 101), dtype=np.uint8)
        assert CenterEstimator().estimate(image) == TargetCenter(50.5, 25.5)

    def test_holes_do_not_move_center(self):
        """Test the reference policy ignores the holes."""
        image = np.zeros((1000, 1000), dtype=np.uint8)
        holes = [DetectedHole(10.0, 10.0, 5.0)]
        assert CenterEstimator().estimate(image, holes) == TargetCenter(500.0, 500.0)

    def test_unknown_policy(self):
        """Test unknown policy names are rejected up front."""
        with pytest.raises(ValueError):
            CenterEstimator(policy='bullseye')

    def test_fallback_when_policy_gives_up(self, monkeypatch):
        """Test a policy returning None falls back to the image center."""
        monkeypatch.setitem(CENTER_POLICIES, 'never', lambda image, holes: None)
        image = np.zeros((200, 300), dtype=np.uint8)
        assert CenterEstimator('never').estimate(image) == TargetCenter(150.0, 100.0)
