import io

import pytest
from reportlab.pdfgen import canvas

from schedule_converter.exceptions import DocumentReadError
from schedule_converter.extractors import FragmentCollector, PdfPlumberDocument, ScheduleDocument
from schedule_converter.extractors import pdf_document
from schedule_converter.models import ScheduleActivity
from schedule_converter.parsers import ScheduleParser


class FakePage:
    def __init__(self, words, height=612.0, error=None):
        self.words = words
        self.height = height
        self.error = error
        self.kwargs = None

    def extract_words(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.words


class FakePDF:
    def __init__(self, pages):
        self.pages = pages
        self.closed = False

    def close(self):
        self.closed = True


def test_yields_pages_in_order(fake_document, frag):
    document = fake_document([[frag("a", 5, 100)], [], [frag("b", 5, 100)]])

    pages = list(FragmentCollector().iter_pages(document))

    assert [number for number, _ in pages] == [1, 2, 3]
    assert [[f.text for f in fragments] for _, fragments in pages] == [["a"], [], ["b"]]


def test_collect_concatenates_pages(fake_document, frag):
    document = fake_document([[frag("a", 5, 100), frag("b", 60, 100)], [frag("c", 5, 300)]])

    fragments = FragmentCollector().collect(document)

    assert [f.text for f in fragments] == ["a", "b", "c"]


def test_pages_are_fetched_one_at_a_time(fake_document):
    document = fake_document([[], [], []])
    pages = FragmentCollector().iter_pages(document)

    next(pages)

    assert document.requested == [1]


def test_page_failure_raises_document_read_error(fake_document, frag):
    document = fake_document([[frag("a", 5, 100)], [frag("b", 5, 100)]], fail_on=2)

    with pytest.raises(DocumentReadError) as excinfo:
        FragmentCollector().collect(document)

    assert excinfo.value.page_number == 2
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_prints_progress(fake_document, capsys):
    list(FragmentCollector(show_progress=True).iter_pages(fake_document([[], []])))

    assert "Processed page 2/2" in capsys.readouterr().out


def test_fake_document_satisfies_protocol(fake_document):
    assert isinstance(fake_document([]), ScheduleDocument)


def make_word(text, x0, baseline, bottom):
    return {
        "text": text,
        "x0": x0,
        "top": bottom - 10.0,
        "bottom": bottom,
        "chars": [{"text": text[0], "matrix": (10.0, 0.0, 0.0, 10.0, x0, baseline)}],
    }


def test_pdfplumber_words_become_fragments_at_their_baseline():
    # Glyph box bottoms differ by font descent; the baseline does not
    page = FakePage([
        make_word("MILE-100", 5.0, 90.45, 523.49),
        make_word("   ", 40.0, 90.45, 523.62),
        make_word("Install Rebar", 60.5, 90.45, 523.62),
    ], height=612.0)
    document = PdfPlumberDocument(FakePDF([page]))

    fragments = document.page_fragments(1)

    assert [(f.text, f.x, f.y) for f in fragments] == [
        ("MILE-100", 5.0, 90.45),
        ("Install Rebar", 60.5, 90.45),
    ]
    assert page.kwargs["keep_blank_chars"] is True
    assert page.kwargs["return_chars"] is True
    assert document.page_count == 1


def test_generated_pdf_with_mixed_fonts_parses_one_row():
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(792, 612))
    c.setFont("Courier", 10)
    c.drawString(5, 90.45, "MILE-100")
    c.setFont("Helvetica", 10)
    for text, x in [
        ("Install Rebar", 60), ("5", 310), ("0", 410), ("01-JAN-24", 510), ("05-JAN-24*", 610),
    ]:
        c.drawString(x, 90.45, text)
    c.showPage()
    c.save()

    with PdfPlumberDocument.open(buffer.getvalue()) as document:
        fragments = document.page_fragments(1)

    assert [f.text for f in sorted(fragments, key=lambda f: f.x)] == [
        "MILE-100", "Install Rebar", "5", "0", "01-JAN-24", "05-JAN-24*",
    ]
    assert all(f.y == pytest.approx(90.45, abs=0.01) for f in fragments)

    state = ScheduleParser().parse_page(fragments)

    assert state.activities == (ScheduleActivity(
        activity_id="MILE-100",
        activity_name="Install Rebar",
        original_duration="5",
        remaining_duration="0",
        start_date="01-JAN-24",
        finish_date="05-JAN-24",
    ),)
    assert state.rejected_rows == 0


def test_pdfplumber_page_errors_are_wrapped():
    document = PdfPlumberDocument(FakePDF([FakePage([], error=ValueError("bad stream"))]), source="s.pdf")

    with pytest.raises(DocumentReadError) as excinfo:
        document.page_fragments(1)

    assert excinfo.value.page_number == 1
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_page_out_of_range():
    with pytest.raises(DocumentReadError):
        PdfPlumberDocument(FakePDF([])).page_fragments(1)


def test_open_missing_file(tmp_path):
    with pytest.raises(DocumentReadError, match="not found"):
        PdfPlumberDocument.open(tmp_path / "missing.pdf")


def test_open_garbage_bytes():
    with pytest.raises(DocumentReadError):
        PdfPlumberDocument.open(b"this is not a pdf")


def test_open_bytes_uses_pdfplumber(monkeypatch):
    opened = {}

    def fake_open(stream):
        opened["data"] = stream.read()
        return FakePDF([FakePage([])])

    monkeypatch.setattr(pdf_document.pdfplumber, "open", fake_open)

    with PdfPlumberDocument.open(b"%PDF-1.4") as document:
        assert document.page_count == 1
        pdf = document._pdf

    assert opened["data"] == b"%PDF-1.4"
    assert pdf.closed


class BrokenPageTreePDF(FakePDF):
    @property
    def pages(self):
        raise KeyError("Kids")

    @pages.setter
    def pages(self, value):
        pass


def test_unreadable_page_tree_is_wrapped_and_closed(monkeypatch):
    pdf = BrokenPageTreePDF([])
    monkeypatch.setattr(pdf_document.pdfplumber, "open", lambda stream: pdf)

    with pytest.raises(DocumentReadError, match="page tree") as excinfo:
        PdfPlumberDocument.open(b"%PDF-1.4")

    assert isinstance(excinfo.value.__cause__, KeyError)
    assert pdf.closed
