"""Basic usage example for AQT Score."""

from aqtscore.core import TargetAnalyzer
from aqtscore.types import InvalidImage
from aqtscore.utils.io_handler import save_image, JSONWriter


def main():
    """Score a single target photo."""
    image_path = "test_data/targets/sample_target.jpg"

    analyzer = TargetAnalyzer()
    try:
        result = analyzer.analyze_file(image_path)
    except InvalidImage as e:
        print(f"Error: {e}")
        return

    print(f"Detected {len(result.bullet_holes)} holes")
    for i, (hole, score) in enumerate(zip(result.bullet_holes, result.scores), 1):
        print(f"  #{i}: ({hole.x:.0f}, {hole.y:.0f}) r={hole.radius:.1f} -> {score}")
    print(f"Total score: {result.total_score}")

    save_image(result.annotated_image, "output/annotated_target.jpg")
    JSONWriter.save_results(result.to_dict(), "output/score.json")
    print("Results saved to output/")


if __name__ == "__main__":
    main()
