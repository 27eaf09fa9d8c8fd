# src/loaders/records.py
from __future__ import annotations
import argparse
import io
import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional, Sequence, Tuple

import pandas as pd
from pydantic import BaseModel

from config.settings import DATA_DIR, SOURCE_FILES
from src.loaders.errors import SourceMalformed, SourceUnavailable

logger = logging.getLogger(__name__)

BOM = "\ufeff"

Record = Dict[str, str]


class SourceReport(BaseModel):
    source: str
    status: Literal["loaded", "missing", "malformed"]
    rows: int = 0
    error: Optional[str] = None


def read_source(path: Path) -> List[Record]:
    """
    Parse one CSV into header-keyed rows.
    - leading BOM stripped before parsing
    - headers and values trimmed, blank lines skipped
    - every value kept as text
    - a row with more or fewer fields than the header makes the file malformed
    - a repeated header name keeps one column, the later value wins
    """
    if not path.is_file():
        raise SourceUnavailable(path.name, "file not found")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceMalformed(path.name, f"not valid UTF-8 ({e})") from e
    if text.startswith(BOM):
        text = text[len(BOM):]

    # header=None: the header is read as a data row, so a longer row raises
    # instead of turning the first column into the index
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SourceMalformed(path.name, str(e)) from e

    # only cells missing from a short row come back as NaN
    short = df.index[df.isna().any(axis=1)]
    if len(short):
        raise SourceMalformed(path.name, f"row {short[0]} has fewer fields than the header")

    header, *rows = df.values.tolist()
    header = [str(h).strip() for h in header]
    return [
        {h: str(v).strip() for h, v in zip(header, row)}
        for row in rows
    ]


def load_records(
    sources: Sequence[str] = SOURCE_FILES,
    data_dir: str | Path = DATA_DIR,
) -> Tuple[List[Tuple[str, Record]], List[SourceReport]]:
    """
    Read every source in order. Returns (source, record) pairs in file order
    then row order, plus one report per source. A missing or malformed file
    is logged and skipped.
    """
    base = Path(data_dir)
    pairs: List[Tuple[str, Record]] = []
    reports: List[SourceReport] = []

    for source in sources:
        try:
            rows = read_source(base / source)
        except SourceUnavailable:
            logger.warning("File not found: %s", source)
            reports.append(SourceReport(source=source, status="missing", error="file not found"))
            continue
        except SourceMalformed as e:
            logger.error("Error parsing %s: %s", source, e)
            reports.append(SourceReport(source=source, status="malformed", error=str(e)))
            continue

        pairs.extend((source, row) for row in rows)
        reports.append(SourceReport(source=source, status="loaded", rows=len(rows)))
        logger.info("Loaded %d rows from %s", len(rows), source)

    return pairs, reports


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--data-dir", default=DATA_DIR, help="Directory holding the grade CSVs")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    _, reps = load_records(data_dir=args.data_dir)
    for r in reps:
        print(f"{r.status:<10} {r.rows:>6}  {r.source}" + (f"  ({r.error})" if r.error else ""))
