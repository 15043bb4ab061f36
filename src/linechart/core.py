import csv
import io
import re
from typing import List, Optional, Tuple

from .logger import logger
from .utils import is_numeric_axis


def detect_delimiter(sample: str) -> str:
    """Detect the most likely delimiter in the CSV data."""
    delimiters = [',', ';', '\t', ' ', '|']
    delimiter_counts = {}

    # Count occurrences of each delimiter in the first few lines
    lines = sample.split('\n')[:5]
    for delimiter in delimiters:
        count = sum(line.count(delimiter) for line in lines)
        delimiter_counts[delimiter] = count

    return max(delimiter_counts, key=delimiter_counts.get)


def sanitize_column_name(name: str) -> str:
    """Normalize a header into a series name."""
    sanitized = re.sub(r'[^\w]', '_', str(name).strip())
    if not sanitized:
        sanitized = 'unnamed_column'
    return sanitized


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a cell as a float, None for empty or non-numeric cells."""
    if value is None or not str(value).strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


def auto_detect_headers(rows: List[List[str]]) -> bool:
    """Auto-detect if the first row contains headers by comparing numeric field counts.

    Args:
        rows: List of CSV rows (at least 2 rows needed)

    Returns:
        True if first row likely contains headers, False otherwise
    """
    if len(rows) < 2:
        # Not enough data to detect, assume headers exist
        return True

    def count_numeric_fields(row):
        return sum(1 for field in row if parse_number(field) is not None)

    first_numeric_count = count_numeric_fields(rows[0])
    second_numeric_count = count_numeric_fields(rows[1])

    if first_numeric_count == 0 and second_numeric_count > 0:
        return True

    # If first row has many numeric fields, likely not headers
    if first_numeric_count >= len(rows[0]) * 0.7:
        return False

    return first_numeric_count < second_numeric_count


def load_series(csv_data: str, header_mode: Optional[str] = None,
                delimiter: Optional[str] = None) -> Tuple[List[str], List[List[float]]]:
    """Read one series per numeric column from CSV data.

    Args:
        csv_data: CSV data as string
        header_mode: 'auto' (default), 'yes', or 'no' for header detection
        delimiter: Field delimiter, auto-detected when None

    Returns:
        Tuple of (series names, series values)
    """
    if delimiter is None:
        delimiter = detect_delimiter(csv_data)

    rows = [row for row in csv.reader(io.StringIO(csv_data), delimiter=delimiter) if row]
    if not rows:
        raise ValueError("No data found in CSV")

    if header_mode is None or header_mode == 'auto':
        has_headers = auto_detect_headers(rows)
    elif header_mode == 'yes':
        has_headers = True
    elif header_mode == 'no':
        has_headers = False
    else:
        raise ValueError(f"Invalid header_mode: {header_mode}")

    if has_headers:
        headers = [sanitize_column_name(h) for h in rows[0]]
        rows = rows[1:]
    else:
        headers = [f"f{i+1}" for i in range(len(rows[0]))]

    if not rows:
        raise ValueError("No data rows found in CSV")

    names = []
    series = []
    for i, header in enumerate(headers):
        cells = [row[i] if i < len(row) else None for row in rows]
        filled = [cell is not None and bool(cell.strip()) for cell in cells]
        non_empty = [cell for cell, f in zip(cells, filled) if f]
        if not is_numeric_axis(non_empty):
            logger.debug("Skipping non-numeric column %s", header)
            continue

        # Values line up by row, so a column may only end early
        length = len(non_empty)
        if not all(filled[:length]):
            gap = filled.index(False) + 1
            raise ValueError(f"Column {header} has a gap at data row {gap}")

        names.append(header)
        series.append([float(cell) for cell in non_empty])

    if not series:
        raise ValueError("No numeric columns found in CSV")

    logger.debug("Loaded %d series: %s", len(series), ', '.join(names))
    return names, series
