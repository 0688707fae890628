"""
Configuration loading: explicit arguments first, then environment, then defaults.
"""
import os
from pathlib import Path
from typing import Optional

from schedule_converter.models import ColumnBandConfig
from schedule_converter.parsers import GroupingPolicy
from schedule_converter.utils import load_json

BANDS_ENV_VAR = 'SCHEDX_BANDS'
GROUPING_ENV_VAR = 'SCHEDX_LINE_GROUPING'


def load_band_config(path: Optional[str | Path] = None) -> ColumnBandConfig:
    """
    Load column bands.

    Args:
        path: JSON file of {field: [start, end]}, optionally nested under "bands".
              Falls back to $SCHEDX_BANDS, then to the built-in calibration.

    Returns:
        Validated ColumnBandConfig

    Raises:
        ValueError: If the bands are malformed, overlap or are out of order
        OSError: If the file cannot be read
    """
    if path is None:
        path = os.getenv(BANDS_ENV_VAR) or None
    if path is None:
        return ColumnBandConfig.default()

    data = load_json(path)
    if isinstance(data, dict) and isinstance(data.get('bands'), dict):
        data = data['bands']
    if not isinstance(data, dict):
        raise ValueError(f"Band file {path} must contain an object of field -> [start, end]")
    return ColumnBandConfig.from_mapping(data)


def resolve_grouping(value: Optional[str] = None) -> GroupingPolicy:
    """Resolve the line grouping policy from an argument or $SCHEDX_LINE_GROUPING."""
    if value is None:
        value = os.getenv(GROUPING_ENV_VAR) or GroupingPolicy.ROUND.value
    try:
        return GroupingPolicy(value.lower())
    except ValueError:
        choices = ', '.join(policy.value for policy in GroupingPolicy)
        raise ValueError(f"Unknown line grouping '{value}' (expected one of: {choices})")
