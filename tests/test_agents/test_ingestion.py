"""
Unit tests for the Ingestion Agent (CSV parser adapter).
"""

import pytest
import os
import tempfile
from src.agents.ingestion import CsvIngestionAgent, parse_data
from src.models.errors import DatasetSchemaError

HEADER = (
    "review_id,user_id,app_name,review_text,review_language,rating,review_date,"
    "verified_purchase,device_type,num_helpful_votes,user_age,user_country,user_gender"
)


def write_csv(tmpdir, lines, name="reviews.csv"):
    path = os.path.join(tmpdir, name)
    with open(path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n")
    return path


def test_records_keep_strings_and_order():
    """Test that cells stay strings and rows keep file order."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "2,7,X,Great,en,5,2024-01-02,True,phone,003,25,NA,M",
            "1,8,Y,Bad,fr,1.5,2024-01-03,False,tablet,0,40,Norway,",
        ])

        dataset = parse_data(path)

        assert len(dataset) == 2
        assert dataset.errors == []
        first, second = dataset.records
        assert first["review_id"] == "2"
        assert first["num_helpful_votes"] == "003"
        assert first["user_country"] == "NA"
        assert second["rating"] == "1.5"
        assert second["user_gender"] == ""
        assert dataset.fields == HEADER.split(",")


def test_short_row_yields_none_cells():
    """Test that cells missing from a short row come back as None."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,7,X,Great,en,5,2024-01-02",
        ])

        record = parse_data(path).records[0]

        assert record["rating"] == "5"
        assert record["device_type"] is None
        assert record["user_gender"] is None


def test_long_row_is_skipped_and_reported():
    """Test that rows with too many fields are skipped and listed as errors."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,7,X,Great,en,5,2024-01-02,True,phone,0,25,US,F",
            "2,7,X,Great,en,5,2024-01-02,True,phone,0,25,US,F,extra,cells",
            "3,7,X,Great,en,5,2024-01-02,True,phone,0,25,US,F",
        ])

        dataset = parse_data(path)

        assert [r["review_id"] for r in dataset.records] == ["1", "3"]
        assert len(dataset.errors) == 1


def test_quoted_fields():
    """Test that quoted cells with delimiters are parsed as one value."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            '1,7,X,"Fast, simple, great",en,5,2024-01-02,True,phone,0,25,US,F',
        ])

        assert parse_data(path).records[0]["review_text"] == "Fast, simple, great"


def test_missing_required_columns():
    """Test that a header without required columns is rejected."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, ["review_id,app_name,rating", "1,X,5"])

        with pytest.raises(DatasetSchemaError, match="device_type") as excinfo:
            parse_data(path)

        assert "user_gender" in excinfo.value.missing_columns


def test_empty_file():
    """Test that a file without a header is a schema error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "empty.csv")
        open(path, 'w').close()

        with pytest.raises(DatasetSchemaError):
            parse_data(path)


def test_header_only_file():
    """Test that a header with no rows gives an empty dataset."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [HEADER])

        dataset = parse_data(path)

        assert dataset.records == []
        assert len(dataset.fields) == 13


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        CsvIngestionAgent().load("/nonexistent/reviews.csv")


def test_custom_required_columns():
    """Test that the required column set is configurable."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, ["a,b", "1,2"])

        dataset = CsvIngestionAgent(required_columns=("a",)).load(path)

        assert dataset.records == [{"a": "1", "b": "2"}]


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
