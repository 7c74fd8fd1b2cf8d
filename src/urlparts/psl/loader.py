"""
Public Suffix List loading and caching.

Reads PSL text from disk (plain or zstd compressed) or from the copy bundled
with the ``publicsuffixlist`` distribution, and keeps one process-wide rule
set for callers that do not pass their own.
"""

import logging
from pathlib import Path
from typing import Optional

import publicsuffixlist
import zstandard as zstd

from urlparts.config import get_config

from .rules import RuleSet

logger = logging.getLogger(__name__)

BUNDLED_PSL_FILENAME = "public_suffix_list.dat"


def bundled_psl_path() -> Path:
    """Path of the Public Suffix List shipped with ``publicsuffixlist``."""
    return Path(publicsuffixlist.__file__).with_name(BUNDLED_PSL_FILENAME)


def read_psl_text(path: Path | str) -> str:
    """
    Read Public Suffix List text from a file.

    Files ending in ``.zst`` are decompressed first.

    Args:
        path: PSL file path

    Returns:
        Decoded PSL text

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Public Suffix List not found: {path}")

    data = path.read_bytes()
    if path.suffix == ".zst":
        decompressor = zstd.ZstdDecompressor()
        data = decompressor.decompressobj().decompress(data)

    return data.decode("utf-8")


def write_psl_cache(
    text: str, path: Path | str, compression_level: Optional[int] = None
) -> Path:
    """
    Write a zstd compressed copy of PSL text.

    Args:
        text: Raw PSL text
        path: Output path (conventionally ending in ``.dat.zst``)
        compression_level: Zstd level, defaults to config

    Returns:
        Path to the written file
    """
    if compression_level is None:
        compression_level = get_config().psl.cache_compression_level

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    raw = text.encode("utf-8")
    compressed = zstd.ZstdCompressor(level=compression_level).compress(raw)
    path.write_bytes(compressed)

    logger.info(
        f"Wrote PSL cache {path}: {len(raw):,} bytes → {len(compressed):,} bytes"
    )
    return path


def load_rule_set(
    path: Path | str | None = None, include_private: Optional[bool] = None
) -> RuleSet:
    """
    Load a rule set from a PSL file.

    Args:
        path: PSL file (plain or .zst). Defaults to config, then the bundled list.
        include_private: Keep PRIVATE DOMAINS rules. Defaults to config.

    Returns:
        RuleSet
    """
    config = get_config().psl
    if path is None:
        path = config.path or bundled_psl_path()
    if include_private is None:
        include_private = config.include_private

    logger.info(f"Loading Public Suffix List from {path}")
    rule_set = RuleSet.build(read_psl_text(path), include_private=include_private)
    logger.info(f"Loaded {len(rule_set)} public suffix rules")

    return rule_set


# Global rule set instance
_rule_set: Optional[RuleSet] = None


def get_rule_set() -> RuleSet:
    """Get or load the process-wide rule set."""
    global _rule_set
    if _rule_set is None:
        _rule_set = load_rule_set()
    return _rule_set


def set_rule_set(rule_set: RuleSet) -> None:
    """Install an already-built rule set as the process-wide default."""
    global _rule_set
    _rule_set = rule_set


def reset_rule_set() -> None:
    """Reset the process-wide rule set (mainly for testing)."""
    global _rule_set
    _rule_set = None
