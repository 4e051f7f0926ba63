"""
Pitch deck analysis pipeline: parse, rule-check, prompt, score with AI, repair and merge
"""

import asyncio
import json
import logging
from typing import List, Optional

from ..config import AnalyzerSettings
from ..deck_parser import parse_document
from ..errors import EmptyDocumentError, MalformedAIResponseError, ProviderError
from ..providers import AIProvider, get_provider
from ..rubric import build_system_prompt, build_user_prompt
from ..rule_checks import run_rule_checks
from ..types import AIAnalysisResponse, FullAnalysisResult, RuleCheckResult, Slide
from ..utils import extract_json_object
from .normalizers import normalize_analysis

logger = logging.getLogger(__name__)

RAW_RESPONSE_LOG_LIMIT = 2000


def extract_slides(buffer: bytes, file_name: str) -> List[Slide]:
    slides = parse_document(buffer, file_name)
    if not slides:
        raise EmptyDocumentError(file_name)
    return slides


def rule_check_report(buffer: bytes, file_name: str) -> dict:
    """Slides and structural checks for a deck, without calling the AI"""
    slides = extract_slides(buffer, file_name)
    return {
        'fileName': file_name,
        'slides': [
            {'slideNumber': s.slide_number, 'wordCount': s.word_count, 'rawText': s.raw_text} for s in slides
        ],
        'ruleChecks': run_rule_checks(slides).model_dump(mode='json', by_alias=True),
    }


def parse_ai_response(raw_response: str) -> AIAnalysisResponse:
    """Extract the JSON object from a model response and repair it into an AIAnalysisResponse"""
    try:
        json_text = extract_json_object(raw_response)
        data = json.loads(json_text)
    except MalformedAIResponseError:
        logger.warning(f'AI response has no JSON object: {raw_response[:RAW_RESPONSE_LOG_LIMIT]!r}')
        raise
    except json.JSONDecodeError as e:
        logger.warning(f'AI response is not valid JSON ({e}): {raw_response[:RAW_RESPONSE_LOG_LIMIT]!r}')
        raise MalformedAIResponseError(f'AI response is not valid JSON: {e}', raw_response=raw_response) from e

    if not isinstance(data, dict):
        raise MalformedAIResponseError('AI response JSON is not an object', raw_response=raw_response)

    return AIAnalysisResponse.model_validate(normalize_analysis(data))


class DeckAnalyzer:
    """
    Runs the full analysis for one deck per call

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(self, provider: AIProvider, timeout: Optional[float] = 90.0):
        self.provider = provider
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: AnalyzerSettings) -> 'DeckAnalyzer':
        return cls(get_provider(settings), timeout=settings.request_timeout)

    def check_slides(self, slides: List[Slide]) -> RuleCheckResult:
        rule_checks = run_rule_checks(slides)
        logger.info(f'Rule checks found {len(rule_checks.warnings)} warnings across {rule_checks.slide_count} slides')
        return rule_checks

    async def _call_provider(self, system_prompt: str, user_content: str) -> str:
        try:
            return await asyncio.wait_for(self.provider.analyze(system_prompt, user_content), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f'AI provider {self.provider.name} timed out after {self.timeout}s')
            raise ProviderError(f'AI service timed out after {self.timeout} seconds') from e

    async def analyze_deck(self, buffer: bytes, file_name: str) -> FullAnalysisResult:
        """
        Analyze a pitch deck file

        Args:
            buffer: Raw PDF or PPTX bytes
            file_name: Original file name; its extension selects the parser

        Returns:
            The repaired AI verdict merged with the rule-check result
        """
        logger.info(f'Starting deck analysis for: {file_name}')

        slides = await asyncio.to_thread(extract_slides, buffer, file_name)
        rule_checks = self.check_slides(slides)

        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(slides)

        logger.info(f'Requesting analysis from {self.provider.name} ({self.provider.model})')
        raw_response = await self._call_provider(system_prompt, user_prompt)
        analysis = parse_ai_response(raw_response)

        if len(analysis.slide_breakdown) != len(slides):
            logger.info(f'Slide breakdown has {len(analysis.slide_breakdown)} entries for {len(slides)} slides')

        result = FullAnalysisResult(**analysis.model_dump(), rule_checks=rule_checks)
        logger.info(f'Deck analysis completed for {file_name}: grade {result.grade.value} ({result.deck_quality_score}/100)')
        return result


async def analyze_deck(
    buffer: bytes, file_name: str, settings: Optional[AnalyzerSettings] = None
) -> FullAnalysisResult:
    """
    Convenience function to analyze a deck with the provider configured in the environment

    Args:
        buffer: Raw PDF or PPTX bytes
        file_name: Original file name
        settings: Optional explicit settings; read from the environment otherwise

    Returns:
        FullAnalysisResult
    """
    analyzer = DeckAnalyzer.from_settings(settings or AnalyzerSettings.from_env())
    return await analyzer.analyze_deck(buffer, file_name)
