"""
Utility functions and helpers for schedule conversion.
"""
import json
import re
from pathlib import Path
from typing import Any, Dict

_WHITESPACE_RUN = re.compile(r'\s+')
_ACTUAL_MARKER = re.compile(r'\s+A$')


def save_text(text: str, output_path: str | Path) -> None:
    """
    Save rendered output to a text file.

    Args:
        text: Text to save
        output_path: Path to output file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)


def load_json(input_path: str | Path) -> Dict[str, Any]:
    """
    Load data from JSON file.

    Args:
        input_path: Path to input JSON file

    Returns:
        Loaded data dictionary
    """
    input_path = Path(input_path)
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def generate_output_filename(input_path: str | Path, suffix: str = '.csv') -> str:
    """
    Generate an output filename based on the input filename.

    Args:
        input_path: Path to input PDF file
        suffix: Extension of the rendered output

    Returns:
        Output filename (e.g., schedule.pdf -> schedule_schedule.csv)
    """
    return f"{Path(input_path).stem}_schedule{suffix}"


def normalize_whitespace(value: str) -> str:
    """Trim and collapse internal whitespace runs to one space."""
    return _WHITESPACE_RUN.sub(' ', value).strip()


def clean_date_field(value: str) -> str:
    """
    Clean a printed schedule date.

    Removes asterisks (constraint flags) and a trailing " A" (actual date marker),
    e.g. "05-JAN-24 A*" -> "05-JAN-24".
    """
    value = normalize_whitespace(value.replace('*', ''))
    return _ACTUAL_MARKER.sub('', value)
