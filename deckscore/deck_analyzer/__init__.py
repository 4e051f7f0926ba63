"""
Deck Analyzer Module

Drives a pitch deck through parsing, rule checks and AI rubric scoring, and
repairs the model's JSON into a FullAnalysisResult.
"""

from .deck_analyzer import DeckAnalyzer, analyze_deck, extract_slides, parse_ai_response, rule_check_report
from .normalizers import derive_grade, normalize_analysis

__all__ = [
    'DeckAnalyzer',
    'analyze_deck',
    'extract_slides',
    'parse_ai_response',
    'rule_check_report',
    'derive_grade',
    'normalize_analysis',
]
