"""I/O handling for target photos and JSON score summaries."""

import cv2
import json
import numpy as np
from pathlib import Path
from typing import Dict, List, Optional, Union

PathLike = Union[str, Path]


class JSONWriter:
    """Write analysis summaries to JSON."""

    @staticmethod
    def save_results(output: Union[Dict, List], output_path: PathLike, indent: int = 2):
        """Save results to JSON file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(output, f, indent=indent)

    @staticmethod
    def load_results(input_path: PathLike) -> Union[Dict, List]:
        """Load results from JSON file."""
        with open(input_path, 'r') as f:
            return json.load(f)


def resize_to_max_dimension(image: np.ndarray, max_dimension: int = 2048) -> np.ndarray:
    """Downscale so the longer side is at most `max_dimension`; smaller images pass through."""
    height, width = image.shape[:2]
    longest = max(width, height)
    if longest <= max_dimension:
        return image

    scale = max_dimension / float(longest)
    new_size = (max(int(round(width * scale)), 1), max(int(round(height * scale)), 1))
    return cv2.resize(image, new_size, interpolation=cv2.INTER_AREA)


def save_image(image: np.ndarray, output_path: PathLike) -> bool:
    """Save image to file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    return cv2.imwrite(str(output_path), image)


def load_image(image_path: PathLike) -> Optional[np.ndarray]:
    """Load a BGR image from file; None if it cannot be decoded."""
    return cv2.imread(str(image_path), cv2.IMREAD_COLOR)
