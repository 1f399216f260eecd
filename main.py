"""
Review Stats - App Store Review Analysis

CLI entry point for running the statistics pipeline.
"""

import argparse
import logging
import math
import sys

from src.orchestrator import PipelineOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def _format_rating(value: float) -> str:
    return "n/a" if math.isnan(value) else f"{value:.2f}"


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Review Stats - app store review sentiment and summary statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze an export with default settings
  python main.py --input data/multilingual_mobile_app_reviews_2025.csv

  # Drop rows whose numbers or dates cannot be parsed
  python main.py --input reviews.csv --strict

  # Also write the cleaned reviews
  python main.py --input reviews.csv --output-dir out --save-cleaned
        """
    )

    parser.add_argument(
        "--input",
        default=str(settings.DEFAULT_INPUT_CSV),
        help=f"Review CSV export (default: {settings.DEFAULT_INPUT_CSV})"
    )

    parser.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Drop rows with unparseable numbers or dates instead of keeping them"
    )

    parser.add_argument(
        "--save-cleaned",
        action="store_true",
        default=settings.SAVE_CLEANED_REVIEWS,
        help="Write cleaned reviews to cleaned_reviews.json"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    coercion_policy = "strict" if args.strict else settings.COERCION_POLICY

    print("=" * 60)
    print("Review Stats - App Store Review Analysis")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Output: {args.output_dir}")
    print(f"Coercion policy: {coercion_policy}")
    print("=" * 60)
    print()

    try:
        orchestrator = PipelineOrchestrator(
            output_root=args.output_dir,
            coercion_policy=coercion_policy,
            save_cleaned=args.save_cleaned
        )
        result = orchestrator.run(args.input)

        summary = result.summary
        stats = result.normalization

        print()
        print("=" * 60)
        print(f"Reviews kept: {stats.kept}/{stats.total}")
        print(f"Most reviewed app: {summary.most_reviewed_app} ({summary.most_reviews} reviews)")
        print(f"Most used device: {summary.most_used_device} ({summary.most_devices} reviews)")
        print(f"Average rating: {_format_rating(summary.avg_rating)}")
        print("=" * 60)
        for name, path in result.output_paths.items():
            print(f"{name}: {path}")

        logger.info("Review Stats completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        print("\n⚠️  Pipeline interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        print(f"\n❌ Pipeline failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
