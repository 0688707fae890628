"""
Utility functions and helpers for schedule conversion.
"""
from .helpers import (
    save_text,
    load_json,
    generate_output_filename,
    normalize_whitespace,
    clean_date_field,
)

__all__ = [
    'save_text',
    'load_json',
    'generate_output_filename',
    'normalize_whitespace',
    'clean_date_field',
]
