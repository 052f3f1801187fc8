from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from awards.records import CanonicalRecord, normalize_rows
from awards.summaries import available_categories, available_classes, available_decades

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DATA_FILE = DATA_DIR / "oscars.csv"

SOURCE_COLUMNS = ["Year", "Category", "CanonicalCategory", "Film", "Name", "Winner", "Class"]

RECORD_COLUMNS = [
    "year",
    "year_parsed",
    "decade",
    "winner_flag",
    "cat",
    "category",
    "award_class",
    "film",
    "name",
]


def file_signature(path: Path) -> Tuple[str, float]:
    return str(path), path.stat().st_mtime


def read_rows(path: Path) -> List[Dict[str, Any]]:
    """Read the nominations CSV as raw string rows; blank cells stay blank strings."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    for col in SOURCE_COLUMNS:
        if col not in df.columns:
            df[col] = None
    return df.to_dict(orient="records")


def build_context(records: Tuple[CanonicalRecord, ...], files: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "files": files or [],
        "records": records,
        "categories": available_categories(records),
        "decades": available_decades(records),
        "classes": available_classes(records),
    }


@lru_cache(maxsize=4)
def _load_dashboard_data_cached(files_sig: Tuple[str, float]) -> Dict[str, Any]:
    path = Path(files_sig[0])
    records = normalize_rows(read_rows(path))
    logger.info("Loaded %d nomination rows from %s", len(records), path.name)
    return build_context(records, files=[path.name])


def load_dashboard_data(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load (and memoize by file name + mtime) the canonical record collection."""
    path = Path(path) if path is not None else DATA_FILE
    if not path.exists():
        logger.warning("Dataset not found: %s", path)
        return build_context(())
    return _load_dashboard_data_cached(file_signature(path))


def records_frame(records: Iterable[CanonicalRecord]) -> pd.DataFrame:
    rows = [asdict(r) for r in records]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
