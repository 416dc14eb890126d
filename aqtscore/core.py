"""
AQT Score Core Analyzer
Main entry point for bullet hole detection and scoring
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np

from aqtscore.config import build_stages, merge_config
from aqtscore.preprocessing.validator import validate_image
from aqtscore.types import AnalysisResult, InvalidImage
from aqtscore.utils.io_handler import load_image, resize_to_max_dimension
from aqtscore.utils.metrics import PerformanceMetrics

logger = logging.getLogger(__name__)


class TargetAnalyzer:
    """Runs preprocessing, detection, scoring and annotation on one photo at a time"""
    
    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize analyzer
        
        Args:
            config: Partial configuration merged over DEFAULT_CONFIG (optional)
        """
        self.config = merge_config(config)
        stages = build_stages(self.config)

        self.preprocessor = stages["preprocessing"]
        self.circle_detector = stages["detection"]
        self.center_estimator = stages["center"]
        self.scorer = stages["scoring"]
        self.annotator = stages["annotation"]
        
    def analyze(self, image: np.ndarray) -> AnalysisResult:
        """
        Analyze a single target photo
        
        Args:
            image: Decoded grayscale, BGR or BGRA image
            
        Returns:
            AnalysisResult with the annotated copy, holes, scores and center

        Raises:
            InvalidImage: if the image is missing or malformed
        """
        validate_image(image)
        metrics = PerformanceMetrics()
        metrics.start_timer("total")
        height, width = image.shape[:2]
        
        # Step 1: Grayscale and blur
        metrics.start_timer("preprocess")
        filtered = self.preprocessor.preprocess(image)
        metrics.stop_timer("preprocess")
        
        # Step 2: Find circular marks
        metrics.start_timer("detect")
        holes = tuple(self.circle_detector.detect(filtered))
        metrics.stop_timer("detect")
        del filtered
        
        # Step 3: Scoring origin
        center = self.center_estimator.estimate(image, holes)
        
        # Step 4: Score every hole in detection order
        metrics.start_timer("score")
        scores = tuple(self.scorer.score_all(holes, center, width, height))
        metrics.stop_timer("score")
        
        # Step 5: Draw overlays on a copy
        metrics.start_timer("annotate")
        annotated = self.annotator.annotate(
            image, holes, center, scores,
            zones=self.scorer.zones,
            zone_radii=self.scorer.boundary_radii(width, height)
        )
        annotated.flags.writeable = False
        metrics.stop_timer("annotate")
        
        total_time = metrics.stop_timer("total")
        logger.debug("Stage timings (ms): %s", metrics.get_summary())
        logger.info("Analyzed %dx%d image: %d holes, total score %d in %.1fms",
                    width, height, len(holes), sum(scores), total_time)
        
        return AnalysisResult(
            annotated_image=annotated,
            bullet_holes=holes,
            scores=scores,
            total_score=sum(scores),
            target_center=center,
            processing_time_ms=total_time
        )
    
    def analyze_file(self, image_path: Union[str, Path]) -> AnalysisResult:
        """
        Load, downscale and analyze a target photo from disk

        Raises:
            InvalidImage: if the file cannot be decoded
        """
        image = load_image(image_path)
        if image is None:
            raise InvalidImage(f"Failed to load image from {image_path}")
        image = resize_to_max_dimension(image, self.config["input"]["max_dimension"])
        return self.analyze(image)


def analyze(image: np.ndarray, config: Optional[Dict[str, Any]] = None) -> AnalysisResult:
    """Analyze one image with a fresh analyzer."""
    return TargetAnalyzer(config).analyze(image)
