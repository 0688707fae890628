import pytest
from pydantic import ValidationError

from schedule_converter.models import (
    DEFAULT_BANDS,
    ColumnBand,
    ColumnBandConfig,
    Line,
    ScheduleActivity,
)
from schedule_converter.models.bands import to_field_name


def test_default_bands_locate_fields():
    bands = ColumnBandConfig.default()

    assert bands.locate(5) == "activity_id"
    assert bands.locate(59.99) == "activity_id"
    assert bands.locate(60) == "activity_name"
    assert bands.locate(310) == "original_duration"
    assert bands.locate(410) == "remaining_duration"
    assert bands.locate(510) == "start_date"
    assert bands.locate(610) == "finish_date"
    assert bands.locate(800) is None


def test_default_bands_round_trip_through_mapping():
    assert ColumnBandConfig.default().as_mapping() == {
        name: list(interval) for name, interval in DEFAULT_BANDS.items()
    }


def test_from_mapping_accepts_camel_case_names():
    bands = ColumnBandConfig.from_mapping({"activityId": [0, 50], "startDate": [50, 90]})
    assert [band.name for band in bands.bands] == ["activity_id", "start_date"]


@pytest.mark.parametrize("name, expected", [
    ("activityId", "activity_id"),
    ("originalDuration", "original_duration"),
    ("Start Date", "start_date"),
    ("finish_date", "finish_date"),
])
def test_to_field_name(name, expected):
    assert to_field_name(name) == expected


def test_overlapping_bands_rejected():
    with pytest.raises(ValidationError, match="overlaps"):
        ColumnBandConfig.from_mapping({"activity_id": [0, 60], "activity_name": [50, 300]})


def test_bands_out_of_order_rejected():
    with pytest.raises(ValidationError, match="left to right"):
        ColumnBandConfig.from_mapping({"activity_name": [60, 300], "activity_id": [0, 60]})


def test_duplicate_bands_rejected():
    with pytest.raises(ValidationError, match="duplicate"):
        ColumnBandConfig(bands=[
            ColumnBand(name="activity_id", start=0, end=10),
            ColumnBand(name="activity_id", start=10, end=20),
        ])


def test_activity_id_band_required():
    with pytest.raises(ValidationError, match="activity_id"):
        ColumnBandConfig.from_mapping({"activity_name": [0, 300]})


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        ColumnBandConfig.from_mapping({"activity_id": [0, 60], "float": [60, 100]})


def test_empty_band_rejected():
    with pytest.raises(ValidationError):
        ColumnBand(name="activity_id", start=10, end=10)


@pytest.mark.parametrize("interval", [[0, 60, 90], 60, None, "06"])
def test_malformed_interval_rejected(interval):
    with pytest.raises(ValueError, match="must be"):
        ColumnBandConfig.from_mapping({"activity_id": interval})


def test_band_is_half_open():
    band = ColumnBand(name="start_date", start=500, end=600)
    assert band.contains(500)
    assert not band.contains(600)


def test_line_sorts_fragments_and_joins_text(frag):
    line = Line(y=90, fragments=[frag("Rebar", 120, 90), frag("Install", 60, 90)])

    assert [f.text for f in line.fragments] == ["Install", "Rebar"]
    assert line.text == "Install Rebar"


@pytest.mark.parametrize("activity_id", ["", "  ", "Total", "TOTAL", "PAGE 3"])
def test_activity_rejects_invalid_ids(activity_id):
    with pytest.raises(ValidationError):
        ScheduleActivity(activity_id=activity_id)


def test_activity_is_immutable():
    activity = ScheduleActivity(activity_id="A100", activity_name="Pour Slab")
    with pytest.raises(ValidationError):
        activity.activity_name = "Other"
