"""Batch scoring of a directory of target photos."""

from pathlib import Path
from aqtscore.core import TargetAnalyzer
from aqtscore.config import merge_config
from aqtscore.scoring.zones import scoring_preset
from aqtscore.types import InvalidImage
from aqtscore.utils.io_handler import save_image, JSONWriter
from aqtscore.utils.logger import setup_logger, create_session_log_file


def main():
    """Score every photo in a folder with the legacy 11-band table."""
    logger = setup_logger('batch_scoring', log_file=create_session_log_file())

    config = merge_config({"scoring": scoring_preset("linear_11")})
    analyzer = TargetAnalyzer(config)

    targets_dir = Path("test_data/targets")
    target_files = sorted(targets_dir.glob("*.jpg"))

    logger.info(f"Scoring {len(target_files)} targets...")

    results = []
    for i, target_path in enumerate(target_files):
        logger.info(f"Target {i+1}/{len(target_files)}: {target_path.name}")

        try:
            result = analyzer.analyze_file(target_path)
        except InvalidImage as e:
            logger.warning(f"Skipping {target_path.name}: {e}")
            continue

        save_image(result.annotated_image, f"output/annotated/{target_path.name}")
        summary = result.to_dict()
        summary['target_name'] = target_path.name
        results.append(summary)

    JSONWriter.save_results(results, "output/batch_scores.json")
    logger.info("Batch scoring complete!")


if __name__ == "__main__":
    main()
