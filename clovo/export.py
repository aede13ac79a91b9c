"""
clovo.export
Render analysis results as text, JSON or CSV, for one password or a batch,
to a string or atomically to a file.
"""

import csv
import io
import json
import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .evaluator import StrengthResult, format_crack_time
from .storage import atomic_write_text, read_lines

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 1000
MAX_BATCH_PASSWORD_LENGTH = 256

FIELDS = [
    "password", "length", "entropy", "crack_time_seconds", "crack_time",
    "score", "rating", "has_lowercase", "has_uppercase", "has_digits",
    "has_symbols", "has_sequential_pattern", "has_keyboard_pattern",
    "has_repeated_chars", "has_repeated_pattern", "contains_dictionary_word",
    "contains_leetspeak", "contains_personal_info", "pattern_penalty",
]


class ExportFormat(Enum):
    TEXT = "text"
    JSON = "json"
    CSV = "csv"


def analysis_record(result: StrengthResult, password: str) -> Dict:
    """Flatten a result into the exported field order."""
    return {
        "password": password,
        "length": result.length,
        "entropy": round(result.entropy, 2),
        "crack_time_seconds": _finite(result.crack_time_seconds),
        "crack_time": format_crack_time(result.crack_time_seconds),
        "score": result.strength_score,
        "rating": result.level.label,
        "has_lowercase": result.has_lower,
        "has_uppercase": result.has_upper,
        "has_digits": result.has_digit,
        "has_symbols": result.has_symbol,
        "has_sequential_pattern": result.has_sequential_pattern,
        "has_keyboard_pattern": result.has_keyboard_pattern,
        "has_repeated_chars": result.has_repeated_chars,
        "has_repeated_pattern": result.has_repeated_pattern,
        "contains_dictionary_word": result.contains_dictionary_word,
        "contains_leetspeak": result.contains_leetspeak,
        "contains_personal_info": result.contains_personal_info,
        "pattern_penalty": result.pattern_penalty,
    }


def _finite(seconds: float) -> Optional[float]:
    # JSON has no infinity; an estimate past float range is written as null
    if math.isinf(seconds):
        return None
    return round(seconds, 2)


def _csv_value(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _render_csv(records: List[Dict]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=FIELDS, lineterminator="\n")
    writer.writeheader()
    for rec in records:
        writer.writerow({k: _csv_value(v) for k, v in rec.items()})
    return buf.getvalue()


def _render_text(record: Dict) -> str:
    return "".join(f"{k}: {_csv_value(v)}\n" for k, v in record.items())


def render_analysis(result: StrengthResult, password: str, fmt: ExportFormat) -> str:
    record = analysis_record(result, password)
    if fmt is ExportFormat.JSON:
        return json.dumps(record, ensure_ascii=False, indent=2, allow_nan=False) + "\n"
    if fmt is ExportFormat.CSV:
        return _render_csv([record])
    return _render_text(record)


def render_batch(results: Sequence[StrengthResult], passwords: Sequence[str], fmt: ExportFormat) -> str:
    if len(results) != len(passwords):
        raise ValueError("results and passwords must have the same length")
    records = [analysis_record(r, p) for r, p in zip(results, passwords)]
    if fmt is ExportFormat.JSON:
        return json.dumps(records, ensure_ascii=False, indent=2, allow_nan=False) + "\n"
    if fmt is ExportFormat.CSV:
        return _render_csv(records)
    return "\n".join(_render_text(rec) for rec in records)


def export_analysis(result: StrengthResult, password: str, path: str, fmt: ExportFormat) -> None:
    atomic_write_text(path, render_analysis(result, password, fmt))


def export_batch_results(
    results: Sequence[StrengthResult],
    passwords: Sequence[str],
    path: str,
    fmt: ExportFormat,
) -> None:
    atomic_write_text(path, render_batch(results, passwords, fmt))


def read_batch_file(path: str) -> List[str]:
    """
    Read passwords for batch analysis, one per line. Blank lines are
    skipped, over-long lines are skipped with a warning, and at most
    MAX_BATCH_SIZE passwords are returned.
    """
    passwords: List[str] = []
    for line in read_lines(path):
        if len(passwords) >= MAX_BATCH_SIZE:
            logger.warning("batch limited to %d passwords; ignoring the rest", MAX_BATCH_SIZE)
            break
        if len(line) > MAX_BATCH_PASSWORD_LENGTH:
            logger.warning("skipping password longer than %d characters", MAX_BATCH_PASSWORD_LENGTH)
            continue
        passwords.append(line)
    return passwords
