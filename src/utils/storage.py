"""
Storage utility.

File I/O helpers for persisting analysis reports as JSON.
"""

import json
import os
import logging
from pathlib import Path
from typing import Dict, Optional

from src.models.report import AnalysisReport

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Writes and reads analysis reports under an output directory.

    Reports are stored as <output_root>/report_<dataset name>.json.
    """

    def __init__(self, output_root: str):
        """
        Initialize report storage.

        Args:
            output_root: Directory reports are written to
        """
        self.output_root = str(output_root)
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized ReportStorage with output_root={self.output_root}")

    def report_path(self, source: str) -> str:
        """Path of the report file for a dataset path."""
        return os.path.join(self.output_root, f"report_{Path(source).stem}.json")

    def save_report(self, report: AnalysisReport) -> str:
        """
        Save a report as JSON.

        Args:
            report: Report produced by the pipeline

        Returns:
            Path of the written file
        """
        filepath = self.report_path(report.source)

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            logger.info(f"Saved report to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save report for {report.source}: {e}")
            raise

        return filepath

    def load_report(self, filepath: str) -> Optional[Dict]:
        """
        Load a previously saved report.

        Args:
            filepath: Path to the report JSON

        Returns:
            Report dict, or None if the file doesn't exist
        """
        if not os.path.exists(filepath):
            logger.warning(f"No report found at {filepath}")
            return None

        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
