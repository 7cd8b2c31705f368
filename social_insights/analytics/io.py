"""Arrow boundary between record sources and the aggregator."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.csv as pa_csv
import pyarrow.json as pa_json
import pyarrow.parquet as pq

from social_insights.analytics.types import AnalyticsOverview, AnalyticsRecord, PlatformSummary
from social_insights.common.utils import ArrowConverter

logger = logging.getLogger(__name__)

_READERS = {
    ".parquet": pq.read_table,
    ".csv": pa_csv.read_csv,
    ".json": pa_json.read_json,
    ".jsonl": pa_json.read_json,
}


def records_from_table(table: pa.Table) -> list[AnalyticsRecord]:
    """Convert an arrow table into analytics records."""
    return [AnalyticsRecord.model_validate(row) for row in table.to_pylist()]


def read_records(path: str | Path) -> list[AnalyticsRecord]:
    """Read analytics records from a parquet, csv or newline-delimited json file."""
    path = Path(path)
    if (reader := _READERS.get(path.suffix.lower())) is None:
        raise ValueError(f"Unsupported record file format: {path.suffix}")

    logger.info(f"Reading records from {path}")
    table = reader(str(path))
    logger.debug(f"Record schema: {table.schema}")

    records = records_from_table(table)
    logger.info(f"Read {len(records)} records from {path.name}")
    return records


def overview_to_table(overview: AnalyticsOverview) -> pa.Table:
    """Tabulate an overview, one row per platform with the total last."""
    schema = ArrowConverter.to_arrow_schema(PlatformSummary, pa.field("platform", pa.string()))
    rows = [{"platform": name, **row} for name, row in overview.to_dict().items()]
    return pa.Table.from_pylist(rows, schema=schema)
