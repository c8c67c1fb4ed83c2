"""
Ingestion Agent.

Reads an app review CSV dataset into raw records: one dict per row,
keyed by the header, with string cells and None for missing cells.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from src.models.errors import DatasetSchemaError
import config.settings as settings

logger = logging.getLogger(__name__)

RawRecord = Dict[str, Optional[str]]


@dataclass
class ParsedDataset:
    """
    Output of the parser adapter.
    Rows appear in file order; errors lists rows the tokenizer rejected.
    """
    source: str
    fields: List[str] = field(default_factory=list)
    records: List[RawRecord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


class CsvIngestionAgent:
    """
    Loads review datasets from CSV files.

    Every cell is kept as text: pandas is told not to infer dtypes and not
    to turn tokens such as "NA" or "null" into missing values. Only cells
    that are absent from a short row come back as None.
    """

    def __init__(
        self,
        required_columns: Sequence[str] = settings.REQUIRED_COLUMNS,
        encoding: str = settings.CSV_ENCODING
    ):
        """
        Initialize ingestion agent.

        Args:
            required_columns: Header names the dataset must contain
            encoding: Text encoding of the CSV file
        """
        self.required_columns = tuple(required_columns)
        self.encoding = encoding

    def load(self, path) -> ParsedDataset:
        """
        Parse a CSV file into raw records.

        Args:
            path: Path to the CSV file

        Returns:
            ParsedDataset with records in file order

        Raises:
            FileNotFoundError: If the file does not exist
            DatasetSchemaError: If the header lacks required columns
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dataset not found: {path}")

        dataset = ParsedDataset(source=str(path))

        def _skip_bad_line(bad_line: List[str]) -> None:
            dataset.errors.append(
                f"Too many fields ({len(bad_line)}) in row starting {bad_line[:3]}"
            )
            return None

        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding=self.encoding,
                engine="python",
                on_bad_lines=_skip_bad_line
            )
        except pd.errors.EmptyDataError:
            raise DatasetSchemaError(self.required_columns, source=str(path))

        dataset.fields = [str(col) for col in df.columns]

        missing = [col for col in self.required_columns if col not in dataset.fields]
        if missing:
            raise DatasetSchemaError(missing, source=str(path))

        dataset.records = [
            {col: (None if pd.isna(value) else value) for col, value in row.items()}
            for row in df.to_dict(orient="records")
        ]

        for error in dataset.errors:
            logger.warning(f"Skipped malformed row in {path.name}: {error}")

        logger.info(
            f"Loaded {len(dataset.records)} rows with {len(dataset.fields)} columns "
            f"from {path} ({len(dataset.errors)} malformed rows skipped)"
        )
        return dataset


def parse_data(path) -> ParsedDataset:
    """Parse a review CSV file with the default settings."""
    return CsvIngestionAgent().load(path)
