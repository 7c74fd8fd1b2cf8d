"""
Batch processing example.

Decomposes a column of URLs with Polars and groups them by registrable
domain. Also shows caching the PSL as a zstd-compressed file.
"""

import logging
import tempfile
from pathlib import Path

import polars as pl

from urlparts.batch import UrlBatchProcessor
from urlparts.psl import bundled_psl_path, load_rule_set, read_psl_text, write_psl_cache
from urlparts.url import Parser

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run batch processing example."""
    print("=" * 60)
    print("urlparts: Batch Processing Example")
    print("=" * 60)

    # Cache the bundled list compressed, then load from the cache
    with tempfile.TemporaryDirectory() as tmpdir:
        cache_path = write_psl_cache(
            read_psl_text(bundled_psl_path()), Path(tmpdir) / "psl.dat.zst"
        )
        rule_set = load_rule_set(cache_path)

    processor = UrlBatchProcessor(parser=Parser(rule_set))

    sample_data = pl.DataFrame(
        {
            "url": [
                "https://www.example.com/page1",
                "https://subdomain.example.com/page2?param=value",
                "http://example.org:8080/path/to/resource",
                "https://www.example.co.uk/british-site",
                "https://news.bbc.co.uk/sport",
                "/relative/only",
                "http:///broken",
                None,
            ],
        }
    )

    print(f"\nInput: {len(sample_data)} URLs")
    result = processor.process_batch(sample_data)
    print(f"Output: {len(result)} decomposed records")

    print("\nOutput Schema:")
    for col, dtype in result.schema.items():
        print(f"  {col}: {dtype}")

    print("\nRecords:")
    print(result.select(["host", "public_suffix", "registrable_domain", "subdomain", "resource"]))

    print("\nURLs per registrable domain:")
    print(
        result.filter(pl.col("registrable_domain").is_not_null())
        .group_by("registrable_domain")
        .len()
        .sort("len", descending=True)
    )

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
