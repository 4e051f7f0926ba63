import io
import re
import zipfile

import pytest

from conftest import build_pdf, build_pptx
from deckscore.deck_parser import PARSERS, parse_document, register_parser, split_pages
from deckscore.errors import DocumentParseError, UnsupportedFormatError
from deckscore.types import EMPTY_SLIDE_TEXT, Slide


def test_pdf_pages_become_numbered_slides():
    data = build_pdf(['Acme Robotics', 'The problem we solve', 'Our team of founders'])

    slides = parse_document(data, 'deck.pdf')

    assert [s.slide_number for s in slides] == [1, 2, 3]
    assert slides[0].raw_text == 'Acme Robotics'
    assert 'problem' in slides[1].raw_text
    assert slides[2].word_count == 4


def test_blank_pdf_page_is_dropped_and_rest_renumbered():
    data = build_pdf(['First page', '', 'Third page'])

    slides = parse_document(data, 'deck.pdf')

    assert [s.slide_number for s in slides] == [1, 2]
    assert slides[1].raw_text == 'Third page'


def test_pdf_without_text_yields_no_slides():
    assert parse_document(build_pdf(['']), 'scan.pdf') == []


def test_split_pages_prefers_form_feed():
    slides = split_pages('one\fTwo words\f  \fthree')

    assert [(s.slide_number, s.raw_text) for s in slides] == [(1, 'one'), (2, 'Two words'), (3, 'three')]


def test_split_pages_falls_back_to_blank_line_runs():
    slides = split_pages('Title slide\n\n\nProblem slide\nwith two lines\n\n\n\nAsk')

    assert [s.raw_text for s in slides] == ['Title slide', 'Problem slide\nwith two lines', 'Ask']
    assert slides[1].word_count == 5


def test_split_pages_keeps_double_newlines_inside_a_page():
    slides = split_pages('Heading\n\nBody text')

    assert len(slides) == 1


def test_pptx_slides_in_order_with_empty_placeholder():
    data = build_pptx(['Acme Robotics', '', 'Team: two founders'])

    slides = parse_document(data, 'deck.pptx')

    assert [s.slide_number for s in slides] == [1, 2, 3]
    assert slides[0].raw_text == 'Acme Robotics'
    assert slides[1] == Slide(slide_number=2, raw_text=EMPTY_SLIDE_TEXT, word_count=0)
    assert slides[2].word_count == 3


def test_pptx_without_slides_yields_no_slides():
    assert parse_document(build_pptx([]), 'empty.pptx') == []


def test_unsupported_extension_is_rejected_before_parsing():
    with pytest.raises(UnsupportedFormatError) as exc_info:
        parse_document(b'plain text', 'deck.txt')

    assert exc_info.value.extension == 'txt'
    assert '.txt' in str(exc_info.value)


def test_missing_extension_is_rejected():
    with pytest.raises(UnsupportedFormatError):
        parse_document(b'data', 'README')


def test_extension_match_is_case_insensitive():
    slides = parse_document(build_pptx(['Hello there']), 'Deck.PPTX')

    assert slides[0].raw_text == 'Hello there'


@pytest.mark.parametrize('file_name', ['broken.pdf', 'broken.pptx'])
def test_garbage_bytes_raise_parse_error(file_name):
    with pytest.raises(DocumentParseError):
        parse_document(b'this is not a real document', file_name)


def test_register_parser_adds_a_format(monkeypatch):
    monkeypatch.setitem(PARSERS, 'txt', PARSERS['pdf'])
    register_parser('.TXT', lambda buffer: split_pages(buffer.decode()))

    slides = parse_document(b'alpha\fbeta', 'notes.txt')

    assert [s.raw_text for s in slides] == ['alpha', 'beta']


def _reorder_pptx(data, extra_slides=None):
    """Reverse the presentation's slide list and write the archive entries in reverse order"""
    with zipfile.ZipFile(io.BytesIO(data)) as source:
        entries = [(name, source.read(name)) for name in source.namelist()]

    rewritten = []
    for name, content in entries:
        if name == 'ppt/presentation.xml':
            xml = content.decode('utf-8')
            ids = re.findall(r'<p:sldId [^>]*/>', xml)
            start = xml.index(ids[0])
            end = xml.index(ids[-1]) + len(ids[-1])
            content = (xml[:start] + ''.join(reversed(ids)) + xml[end:]).encode('utf-8')
        rewritten.append((name, content))
    rewritten.extend((extra_slides or {}).items())

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as target:
        for name, content in reversed(rewritten):
            target.writestr(name, content)
    return buffer.getvalue()


def test_pptx_slides_follow_part_number_not_presentation_order():
    texts = [f'Slide number {n}' for n in range(1, 12)]
    data = _reorder_pptx(build_pptx(texts))

    slides = parse_document(data, 'deck.pptx')

    assert [s.raw_text for s in slides] == texts
    assert [s.slide_number for s in slides] == list(range(1, 12))


def test_pptx_reads_slide_parts_missing_from_the_slide_list():
    data = build_pptx(['alpha one', 'bravo two'])
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        first = archive.read('ppt/slides/slide1.xml')
    unlisted = first.replace(b'alpha one', b'charlie three')

    slides = parse_document(_reorder_pptx(data, {'ppt/slides/slide10.xml': unlisted}), 'deck.pptx')

    assert [s.raw_text for s in slides] == ['alpha one', 'bravo two', 'charlie three']
