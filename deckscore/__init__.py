"""
deckscore - pitch deck analysis

Extracts slide text from PDF/PPTX decks, runs deterministic structural checks
and scores the deck on a 12-dimension rubric with a generative-AI model.
"""

from .config import AnalyzerSettings
from .deck_analyzer import DeckAnalyzer, analyze_deck
from .errors import (
    ConfigurationError,
    DeckAnalysisError,
    DocumentParseError,
    EmptyDocumentError,
    InputError,
    MalformedAIResponseError,
    ProviderError,
    UnsupportedFormatError,
)
from .types import AIAnalysisResponse, FullAnalysisResult, RuleCheckResult, Slide

__all__ = [
    'AnalyzerSettings',
    'DeckAnalyzer',
    'analyze_deck',
    'ConfigurationError',
    'DeckAnalysisError',
    'DocumentParseError',
    'EmptyDocumentError',
    'InputError',
    'MalformedAIResponseError',
    'ProviderError',
    'UnsupportedFormatError',
    'AIAnalysisResponse',
    'FullAnalysisResult',
    'RuleCheckResult',
    'Slide',
]
