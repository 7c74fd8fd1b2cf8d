"""
Batch URL decomposition.

Runs a column of raw URLs through the parser and returns one row of parts
per URL as a Polars DataFrame.
"""

import logging
from typing import Any, Optional

import polars as pl

from urlparts.config import get_config
from urlparts.exceptions import InvalidUrlError
from urlparts.url import Parser, Url, get_default_parser

from .ids import IDGenerator, url_key

logger = logging.getLogger(__name__)

OUTPUT_SCHEMA = {
    "url_id": pl.Int64,
    "scheme": pl.Utf8,
    "host": pl.Utf8,
    "port": pl.Int32,
    "path": pl.Utf8,
    "query": pl.Utf8,
    "fragment": pl.Utf8,
    "public_suffix": pl.Utf8,
    "registrable_domain": pl.Utf8,
    "subdomain": pl.Utf8,
    "canonical": pl.Utf8,
    "resource": pl.Utf8,
    "domain_id": pl.Int64,
    "domain_prefix": pl.Utf8,
}


class UrlBatchProcessor:
    """
    Decompose batches of URLs.

    Usage:
        processor = UrlBatchProcessor()
        df = processor.process_batch(pl.DataFrame({"url": urls}))
        df.group_by("registrable_domain").len()
    """

    def __init__(
        self,
        parser: Optional[Parser] = None,
        id_generator: Optional[IDGenerator] = None,
    ):
        """
        Initialize batch processor.

        Args:
            parser: URL parser (default process-wide parser if None)
            id_generator: ID generator instance (creates new if None)
        """
        self.parser = parser or get_default_parser()
        self.id_generator = id_generator or IDGenerator()
        self.config = get_config()

    def decompose(self, raw_url: str) -> dict[str, Any]:
        """
        Decompose one URL into an output record.

        Raises:
            InvalidUrlError: If the URL cannot be decomposed
        """
        url = Url(raw_url, self.parser)
        record = url.to_dict()

        record["url_id"] = self.id_generator.get_url_id(url_key(record, url.to_string()))
        record.update(
            self.id_generator.domain_fields(
                record["registrable_domain"], self.config.batch.domain_prefix_chars
            )
        )

        # Credentials are never written out
        del record["user"]
        del record["password"]
        return record

    def process_batch(
        self, df: pl.DataFrame, url_column: Optional[str] = None
    ) -> pl.DataFrame:
        """
        Decompose every URL in a DataFrame column.

        Empty and undecomposable URLs are skipped and logged.

        Args:
            df: Input DataFrame
            url_column: Column holding URLs (default from config)

        Returns:
            DataFrame with OUTPUT_SCHEMA columns, one row per decomposed URL

        Raises:
            ValueError: If the URL column is missing
        """
        url_column = url_column or self.config.batch.url_column
        if url_column not in df.columns:
            raise ValueError(f"Column '{url_column}' not found in batch")

        records = []
        skipped = 0

        for raw_url in df.get_column(url_column).to_list():
            if not raw_url:
                skipped += 1
                continue

            try:
                records.append(self.decompose(raw_url))
            except InvalidUrlError as e:
                logger.warning(f"Skipping URL that cannot be decomposed: {e}")
                skipped += 1

        if skipped:
            logger.info(f"Decomposed {len(records)} URLs, skipped {skipped}")

        if not records:
            return self._empty_dataframe()

        result_df = pl.DataFrame(records, infer_schema_length=None)

        # Ensure column types and order
        result_df = result_df.with_columns(
            [pl.col(name).cast(dtype) for name, dtype in OUTPUT_SCHEMA.items()]
        )
        return result_df.select(list(OUTPUT_SCHEMA))

    def _empty_dataframe(self) -> pl.DataFrame:
        """Create empty DataFrame with correct schema."""
        return pl.DataFrame(schema=OUTPUT_SCHEMA)
