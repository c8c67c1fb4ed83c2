"""
App Review Analytics

CLI entry point for analyzing an app review dataset.
"""

import argparse
import logging
import sys

from src.orchestrator import AnalysisPipeline
from src.utils.storage import ReportStorage
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


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="App Review Analytics - sentiment and summary statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the default dataset
  python main.py

  # Analyze a specific file, dropping rows with unparseable values
  python main.py --dataset data/reviews.csv --lenient

  # Print results only, without writing a JSON report
  python main.py --dataset data/reviews.csv --no-save
        """
    )

    parser.add_argument(
        "--dataset",
        default=settings.DEFAULT_DATASET,
        help=f"Path to the review CSV (default: {settings.DEFAULT_DATASET})"
    )

    parser.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Directory for the JSON report (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop rows with unparseable values instead of failing"
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write the JSON report"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def print_report(report) -> None:
    print()
    print("Sentiment by app:")
    for entry in report.app_sentiment:
        print(
            f"  {entry.group_key}: +{entry.positive} ={entry.neutral} -{entry.negative}"
        )

    print("Sentiment by language:")
    for entry in report.language_sentiment:
        print(
            f"  {entry.group_key}: +{entry.positive} ={entry.neutral} -{entry.negative}"
        )

    summary = report.summary
    print()
    if summary.has_data:
        print(f"Most reviewed app: {summary.most_reviewed_app} ({summary.most_reviews} reviews)")
        print(f"Most used device: {summary.most_used_device} ({summary.most_devices} reviews)")
        print(f"Average rating: {summary.avg_rating}")
    else:
        print("No reviews left after cleaning; no summary statistics.")


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    strict = settings.STRICT_COERCION and not args.lenient

    print("=" * 60)
    print("App Review Analytics")
    print("=" * 60)
    print(f"Dataset: {args.dataset}")
    print(f"Strict coercion: {strict}")
    print("=" * 60)

    try:
        pipeline = AnalysisPipeline(strict=strict)
        report = pipeline.run(args.dataset)

        print_report(report)

        print()
        print("=" * 60)
        print("✅ Analysis completed successfully!")
        print(f"Rows: {report.total_rows} read, {report.cleaned_rows} kept, "
              f"{report.excluded_rows} excluded")
        if not args.no_save:
            storage = ReportStorage(args.output_dir)
            output_path = storage.save_report(report)
            print(f"Report: {output_path}")
        print("=" * 60)

        logger.info("Review analytics completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\n⚠️  Analysis interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
