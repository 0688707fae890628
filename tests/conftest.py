from typing import List, Optional

import pytest

from schedule_converter.models import PositionedFragment


def make_fragment(text: str, x: float, y: float) -> PositionedFragment:
    return PositionedFragment(text=text, x=x, y=y)


class FakeDocument:
    """In-memory ScheduleDocument; records which pages were requested."""

    def __init__(self, pages: List[List[PositionedFragment]], fail_on: Optional[int] = None):
        self.pages = pages
        self.fail_on = fail_on
        self.requested: List[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_fragments(self, page_number: int) -> List[PositionedFragment]:
        self.requested.append(page_number)
        if page_number == self.fail_on:
            raise RuntimeError("corrupt content stream")
        return list(self.pages[page_number - 1])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def frag():
    return make_fragment


@pytest.fixture
def fake_document():
    return FakeDocument


@pytest.fixture
def activity_row():
    """One schedule row laid out in the default column bands, at y=90."""
    return [
        make_fragment("MILE-100", 5, 90),
        make_fragment("Install Rebar", 60, 90),
        make_fragment("5", 310, 90),
        make_fragment("0", 410, 90),
        make_fragment("01-JAN-24", 510, 90),
        make_fragment("05-JAN-24*", 610, 90),
    ]
