"""Performance metrics and detector evaluation."""

import numpy as np
from typing import Dict, Sequence, Tuple
from time import perf_counter

from scipy.optimize import linear_sum_assignment
from scipy.spatial.distance import cdist


class PerformanceMetrics:
    """Track performance metrics."""

    def __init__(self):
        self.start_times = {}
        self.durations = {}

    def start_timer(self, name: str):
        """Start timing an operation."""
        self.start_times[name] = perf_counter()

    def stop_timer(self, name: str) -> float:
        """Stop timing and return duration in milliseconds."""
        if name not in self.start_times:
            return 0.0
        duration = (perf_counter() - self.start_times.pop(name)) * 1000
        self.durations[name] = duration
        return duration

    def get_summary(self) -> Dict[str, float]:
        """Get summary of all timings."""
        return self.durations.copy()


class AccuracyMetrics:
    """Compare detected holes against hand-marked ground truth."""

    @staticmethod
    def calculate_precision_recall(true_positives: int, false_positives: int,
                                   false_negatives: int) -> Dict[str, float]:
        """Calculate precision, recall, and F1 score."""
        precision = true_positives / (true_positives + false_positives) if (true_positives + false_positives) > 0 else 0
        recall = true_positives / (true_positives + false_negatives) if (true_positives + false_negatives) > 0 else 0
        f1 = 2 * (precision * recall) / (precision + recall) if (precision + recall) > 0 else 0

        return {
            'precision': precision,
            'recall': recall,
            'f1_score': f1
        }

    @staticmethod
    def match_holes(detected: Sequence[Tuple[float, float]],
                    ground_truth: Sequence[Tuple[float, float]],
                    max_distance: float = 10.0) -> Dict[str, int]:
        """
        One-to-one matching of detected hole centers to ground truth centers.

        Pairs farther apart than `max_distance` pixels do not count as a match.

        Returns:
            Counts of true positives, false positives and false negatives
        """
        if len(detected) == 0 or len(ground_truth) == 0:
            return {
                'true_positives': 0,
                'false_positives': len(detected),
                'false_negatives': len(ground_truth),
            }

        distances = cdist(np.asarray(detected, dtype=float)[:, :2],
                          np.asarray(ground_truth, dtype=float)[:, :2])
        rows, cols = linear_sum_assignment(distances)
        true_positives = int(np.sum(distances[rows, cols] <= max_distance))

        return {
            'true_positives': true_positives,
            'false_positives': len(detected) - true_positives,
            'false_negatives': len(ground_truth) - true_positives,
        }
