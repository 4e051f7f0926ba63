"""
Slide text extraction from PDF and PPTX decks
"""

import io
import logging
import os
import re
import zipfile
from typing import Callable, Dict, List

import fitz  # PyMuPDF for PDF processing
from lxml import etree
from pptx.oxml.ns import qn

from ..errors import DocumentParseError, UnsupportedFormatError
from ..types import EMPTY_SLIDE_TEXT, Slide

logger = logging.getLogger(__name__)

PAGE_BREAK = '\f'
# Fallback page boundary for PDFs whose text comes back as a single block
BLANK_LINE_RUN = re.compile(r'\n{3,}')
SLIDE_ENTRY = re.compile(r'^ppt/slides/slide(\d+)\.xml$')

SlideParser = Callable[[bytes], List[Slide]]


def split_pages(text: str) -> List[Slide]:
    """Split extracted document text into numbered slides, dropping empty pages"""
    if not text.strip():
        return []

    pages = [page for page in text.split(PAGE_BREAK) if page.strip()]
    if len(pages) <= 1:
        pages = [page for page in BLANK_LINE_RUN.split(text) if page.strip()]

    return [Slide.from_text(number, page) for number, page in enumerate(pages, 1)]


def parse_pdf(buffer: bytes) -> List[Slide]:
    try:
        doc = fitz.open(stream=buffer, filetype='pdf')
    except Exception as e:
        raise DocumentParseError(f'Could not read PDF document: {e}') from e

    try:
        if doc.needs_pass:
            raise DocumentParseError('PDF document is password protected')
        text = PAGE_BREAK.join(page.get_text('text') for page in doc)
    finally:
        doc.close()

    return split_pages(text)


def _slide_text(slide_xml: bytes) -> str:
    element = etree.fromstring(slide_xml)
    runs = [(node.text or '').strip() for node in element.iter(qn('a:t'))]
    return ' '.join(run for run in runs if run)


def parse_pptx(buffer: bytes) -> List[Slide]:
    """
    Every ppt/slides/slide<N>.xml entry of the archive, ordered by N

    The presentation's own slide list is not consulted, so hidden or unlisted
    slide parts are still read.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(buffer)) as archive:
            entries = []
            for name in archive.namelist():
                match = SLIDE_ENTRY.match(name)
                if match:
                    entries.append((int(match.group(1)), name))
            entries.sort()
            texts = [_slide_text(archive.read(name)) for _, name in entries]
    except Exception as e:
        raise DocumentParseError(f'Could not read PPTX document: {e}') from e

    slides = []
    for number, text in enumerate(texts, 1):
        if text:
            slides.append(Slide.from_text(number, text))
        else:
            slides.append(Slide(slide_number=number, raw_text=EMPTY_SLIDE_TEXT, word_count=0))
    return slides


PARSERS: Dict[str, SlideParser] = {
    'pdf': parse_pdf,
    'pptx': parse_pptx,
}


def register_parser(extension: str, parser: SlideParser) -> None:
    PARSERS[extension.lower().lstrip('.')] = parser


def file_extension(file_name: str) -> str:
    base = os.path.basename((file_name or '').strip()).lower()
    if '.' not in base:
        return ''
    return base.rsplit('.', 1)[1]


def parse_document(buffer: bytes, file_name: str) -> List[Slide]:
    """
    Extract slides from a deck, choosing the parser by file extension

    Args:
        buffer: Raw file contents
        file_name: Original file name, used only for its extension

    Returns:
        Slides numbered 1..N in document order; empty if no text was found
    """
    extension = file_extension(file_name)
    parser = PARSERS.get(extension)
    if parser is None:
        raise UnsupportedFormatError(extension)

    slides = parser(buffer)
    logger.info(f'Extracted {len(slides)} slides from {file_name}')
    return slides
