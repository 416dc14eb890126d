"""Tests for I/O, metrics and logging utilities."""

import logging
import time
from pathlib import Path

import numpy as np
import pytest
from aqtscore.utils.io_handler import JSONWriter, load_image, resize_to_max_dimension, save_image
from aqtscore.utils.logger import create_session_log_file, setup_logger
from aqtscore.utils.metrics import AccuracyMetrics, PerformanceMetrics


class TestIOHandler:
    """Test image and JSON helpers."""

    def test_resize_large_image(self):
        """Test the longer side is capped."""
        image = np.zeros((3000, 4000, 3), dtype=np.uint8)
        resized = resize_to_max_dimension(image, 2048)
        assert resized.shape == (1536, 2048, 3)

    def test_resize_portrait(self):
        """Test capping works when height is the longer side."""
        image = np.zeros((4096, 1024), dtype=np.uint8)
        assert resize_to_max_dimension(image, 2048).shape == (2048, 512)

    def test_small_image_untouched(self):
        """Test images within the limit are returned as-is."""
        image = np.zeros((2048, 1000, 3), dtype=np.uint8)
        assert resize_to_max_dimension(image, 2048) is image

    def test_save_and_load_image(self, tmp_path):
        """Test PNG round trip."""
        image = np.random.randint(0, 256, (40, 60, 3), dtype=np.uint8)
        path = tmp_path / 'out' / 'target.png'
        assert save_image(image, path)
        assert np.array_equal(load_image(path), image)

    def test_load_missing_image(self, tmp_path):
        """Test unreadable files give None."""
        assert load_image(tmp_path / 'missing.jpg') is None

    def test_json_round_trip(self, tmp_path):
        """Test score summaries survive a save and load."""
        summary = {'total_score': 12, 'scores': [5, 4, 3]}
        path = tmp_path / 'results' / 'score.json'
        JSONWriter.save_results(summary, path)
        assert JSONWriter.load_results(path) == summary


class TestPerformanceMetrics:
    """Test timers."""

    def test_timer(self):
        """Test a timer measures elapsed milliseconds."""
        metrics = PerformanceMetrics()
        metrics.start_timer('test_operation')
        time.sleep(0.05)
        duration = metrics.stop_timer('test_operation')

        assert duration >= 40
        assert metrics.get_summary() == {'test_operation': duration}

    def test_stop_unknown_timer(self):
        """Test stopping a timer that never started."""
        assert PerformanceMetrics().stop_timer('missing') == 0.0


class TestAccuracyMetrics:
    """Test detector evaluation."""

    def test_precision_recall(self):
        """Test precision, recall and F1."""
        result = AccuracyMetrics.calculate_precision_recall(8, 2, 2)
        assert result['precision'] == pytest.approx(0.8)
        assert result['recall'] == pytest.approx(0.8)
        assert result['f1_score'] == pytest.approx(0.8)

    def test_precision_recall_no_detections(self):
        """Test zero counts do not divide by zero."""
        result = AccuracyMetrics.calculate_precision_recall(0, 0, 0)
        assert result == {'precision': 0, 'recall': 0, 'f1_score': 0}

    def test_match_holes(self):
        """Test one-to-one matching within a distance limit."""
        detected = [(100, 100), (203, 198), (400, 400)]
        truth = [(101, 99), (200, 200), (300, 300)]
        counts = AccuracyMetrics.match_holes(detected, truth, max_distance=5)
        assert counts == {'true_positives': 2, 'false_positives': 1, 'false_negatives': 1}

    def test_match_holes_no_double_counting(self):
        """Test two detections cannot claim the same hole."""
        detected = [(100, 100), (102, 100)]
        truth = [(101, 100)]
        counts = AccuracyMetrics.match_holes(detected, truth, max_distance=5)
        assert counts['true_positives'] == 1
        assert counts['false_positives'] == 1

    def test_match_holes_empty(self):
        """Test empty inputs."""
        counts = AccuracyMetrics.match_holes([], [(1, 1)])
        assert counts == {'true_positives': 0, 'false_positives': 0, 'false_negatives': 1}

    def test_match_holes_with_radius(self):
        """Test (x, y, radius) triples are accepted."""
        counts = AccuracyMetrics.match_holes([(10, 10, 5)], [(11, 10, 6)])
        assert counts['true_positives'] == 1


class TestLogger:
    """Test logging setup."""

    def test_setup_logger(self):
        """Test console handler and level."""
        logger = setup_logger('aqtscore.test_setup', logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_twice_no_duplicate_handlers(self):
        """Test repeated setup keeps one set of handlers."""
        setup_logger('aqtscore.test_twice')
        logger = setup_logger('aqtscore.test_twice', logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path):
        """Test file logging."""
        log_file = create_session_log_file(str(tmp_path / 'logs'))
        logger = setup_logger('aqtscore.test_file', log_file=log_file)
        logger.info('hello')
        for handler in logger.handlers:
            handler.flush()
        assert 'hello' in open(log_file).read()
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_level_name(self):
        """Test levels can be given by name."""
        logger = setup_logger('aqtscore.test_level_name', 'debug')
        assert logger.level == logging.DEBUG

    def test_unknown_level_name(self):
        """Test misspelled level names are rejected."""
        with pytest.raises(ValueError):
            setup_logger('aqtscore.test_bad_level', 'LOUD')

    def test_session_log_file_prefix(self, tmp_path):
        """Test session log names carry the prefix and live in the log dir."""
        path = Path(create_session_log_file(str(tmp_path / 'logs'), prefix='batch'))
        assert path.parent == tmp_path / 'logs'
        assert path.parent.is_dir()
        assert path.name.startswith('batch_')
        assert path.suffix == '.log'
