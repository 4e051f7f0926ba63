"""
Deck Parser Module

Turns an uploaded PDF or PPTX deck into an ordered list of text slides.
"""

from .deck_parser import PARSERS, parse_document, parse_pdf, parse_pptx, register_parser, split_pages

__all__ = ['PARSERS', 'parse_document', 'parse_pdf', 'parse_pptx', 'register_parser', 'split_pages']
