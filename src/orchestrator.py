"""
Pipeline Orchestrator.

Runs ingestion, cleaning, sentiment aggregation and summary statistics
over one dataset.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from src.agents.ingestion import CsvIngestionAgent
from src.agents.cleaning import ReviewCleaner
from src.agents.aggregation import sentiment_analysis_app, sentiment_analysis_lang
from src.agents.statistics import summary_statistics
from src.models.report import AnalysisReport
import config.settings as settings

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """
    Orchestrates one batch run over a review dataset.

    Stages:
    1. Ingestion → 2. Cleaning → 3. Sentiment by app / language
    → 4. Summary statistics
    """

    def __init__(self, strict: Optional[bool] = None):
        """
        Initialize pipeline.

        Args:
            strict: Abort on unparseable values instead of dropping the row.
                Defaults to settings.STRICT_COERCION.
        """
        if strict is None:
            strict = settings.STRICT_COERCION

        self.ingestion_agent = CsvIngestionAgent()
        self.cleaner = ReviewCleaner(strict=strict)

        logger.info(f"Pipeline initialized (strict={strict})")

    def run(self, dataset_path) -> AnalysisReport:
        """
        Analyze a dataset end to end.

        Args:
            dataset_path: Path to the review CSV file

        Returns:
            AnalysisReport with sentiment breakdowns and summary statistics
        """
        start_time = datetime.now()
        logger.info(f"Starting analysis of {dataset_path}")

        # STAGE 1: Ingestion
        dataset = self.ingestion_agent.load(dataset_path)

        # STAGE 2: Cleaning
        reviews = self.cleaner.clean(dataset.records)
        if not reviews:
            logger.warning(f"No reviews left after cleaning {dataset_path}")

        # STAGE 3: Sentiment aggregation
        app_sentiment = sentiment_analysis_app(reviews)
        language_sentiment = sentiment_analysis_lang(reviews)

        # STAGE 4: Summary statistics
        summary = summary_statistics(reviews)

        report = AnalysisReport(
            source=dataset.source,
            total_rows=len(dataset.records),
            cleaned_rows=len(reviews),
            summary=summary,
            app_sentiment=app_sentiment,
            language_sentiment=language_sentiment,
            generated_at=datetime.now(timezone.utc).isoformat()
        )

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Analysis complete in {elapsed:.2f}s: {report.total_rows} rows → "
            f"{report.cleaned_rows} reviews, {len(app_sentiment)} apps, "
            f"{len(language_sentiment)} languages"
        )
        return report
