"""
Validation and repair of the model's JSON verdict

The AI output is untrusted: every field is coerced into the expected type and
range instead of being rejected. All functions here are pure and idempotent.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from ..rubric import DIMENSIONS
from ..types import Grade, Impact

logger = logging.getLogger(__name__)

MISSING_DIMENSION_FEEDBACK = 'Not assessed.'

GRADE_THRESHOLDS = [
    (95, Grade.A_PLUS),
    (90, Grade.A),
    (85, Grade.A_MINUS),
    (80, Grade.B_PLUS),
    (75, Grade.B),
    (70, Grade.B_MINUS),
    (65, Grade.C_PLUS),
    (60, Grade.C),
    (55, Grade.C_MINUS),
    (40, Grade.D),
]

METRIC_KEYS = {
    'revenue': 'revenue',
    'arr': 'arr',
    'growthRate': 'growth_rate',
    'users': 'users',
    'fundingAsk': 'funding_ask',
    'burnRate': 'burn_rate',
    'cac': 'cac',
    'ltv': 'ltv',
    'teamSize': 'team_size',
    'runway': 'runway',
}

NULL_STRINGS = {'', 'null', 'none', 'n/a', 'na', 'unknown', 'not provided'}

VALID_IMPACTS = {impact.value for impact in Impact}
VALID_GRADES = {grade.value for grade in Grade}


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip().rstrip('%'))
        except ValueError:
            return None
    return None


def clamp_score(value: Any, low: int, high: int) -> int:
    """Round half-up and clamp into [low, high]; anything non-numeric becomes low"""
    number = _to_number(value)
    if number is None or math.isnan(number):
        return low
    number = max(float(low), min(float(high), number))
    return int(math.floor(number + 0.5))


def derive_grade(deck_quality_score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if deck_quality_score >= threshold:
            return grade.value
    return Grade.F.value


def normalize_grade(value: Any, deck_quality_score: int) -> str:
    if isinstance(value, str) and value.strip().upper() in VALID_GRADES:
        return value.strip().upper()
    derived = derive_grade(deck_quality_score)
    logger.warning(f'Invalid grade {value!r} from AI, derived {derived} from score {deck_quality_score}')
    return derived


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def string_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value if _text(item)]


def normalize_dimensions(value: Any) -> List[Dict[str, Any]]:
    """Exactly one entry per rubric dimension, in rubric order"""
    by_key: Dict[str, Dict[str, Any]] = {}
    if isinstance(value, list):
        for item in value:
            if not isinstance(item, dict):
                continue
            key = _text(item.get('key'))
            # first occurrence wins on duplicates
            by_key.setdefault(key, item)

    dimensions = []
    missing = []
    for definition in DIMENSIONS:
        item = by_key.get(definition.key.value)
        if item is None:
            missing.append(definition.key.value)
            dimensions.append(
                {
                    'key': definition.key.value,
                    'label': definition.label,
                    'score': 0,
                    'feedback': MISSING_DIMENSION_FEEDBACK,
                }
            )
            continue

        dimensions.append(
            {
                'key': definition.key.value,
                'label': definition.label,
                'score': clamp_score(item.get('score'), 0, 10),
                'feedback': _text(item.get('feedback')),
            }
        )

    if missing:
        logger.warning(f'AI response omitted dimensions: {", ".join(missing)}')
    return dimensions


def normalize_improvement(raw: Any) -> Optional[Dict[str, str]]:
    if isinstance(raw, str):
        raw = {'title': raw}
    if not isinstance(raw, dict):
        return None

    title = _text(raw.get('title'))
    description = _text(raw.get('description'))
    if not title and not description:
        return None

    impact = _text(raw.get('impact')).lower()
    if impact not in VALID_IMPACTS:
        impact = Impact.MEDIUM.value

    return {'title': title or description, 'description': description, 'impact': impact}


def normalize_metrics(value: Any) -> Dict[str, Optional[str]]:
    raw = value if isinstance(value, dict) else {}
    metrics: Dict[str, Optional[str]] = {}
    for camel, snake in METRIC_KEYS.items():
        item = raw.get(camel, raw.get(snake))
        text = _text(item)
        metrics[camel] = None if text.lower() in NULL_STRINGS else text
    return metrics


def normalize_slide_entry(raw: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(raw, dict):
        return None

    number = _to_number(raw.get('slideNumber', raw.get('slide_number')))
    if number is None or math.isnan(number) or math.isinf(number) or number < 1:
        return None

    return {
        'slideNumber': int(number),
        'classifiedType': _text(raw.get('classifiedType', raw.get('classified_type'))),
        'summary': _text(raw.get('summary')),
    }


def normalize_analysis(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce a parsed AI response into the AIAnalysisResponse shape

    Args:
        raw: Whatever JSON object the model returned

    Returns:
        A new dict with camelCase keys; never raises for any dict input
    """
    deck_quality_score = clamp_score(raw.get('deckQualityScore'), 0, 100)
    traction_score = clamp_score(raw.get('tractionScore'), 0, 100)

    improvements = raw.get('priorityImprovements')
    if not isinstance(improvements, list):
        improvements = []
    improvement_entries = [entry for entry in map(normalize_improvement, improvements) if entry]

    breakdown = raw.get('slideBreakdown')
    if not isinstance(breakdown, list):
        breakdown = []
    slide_entries = [entry for entry in map(normalize_slide_entry, breakdown) if entry]
    slide_entries.sort(key=lambda entry: entry['slideNumber'])

    return {
        'dimensions': normalize_dimensions(raw.get('dimensions')),
        'strengths': string_list(raw.get('strengths')),
        'weaknesses': string_list(raw.get('weaknesses')),
        'redFlags': string_list(raw.get('redFlags')),
        'priorityImprovements': improvement_entries,
        'extractedMetrics': normalize_metrics(raw.get('extractedMetrics')),
        'slideBreakdown': slide_entries,
        'summary': _text(raw.get('summary')),
        'deckQualityScore': deck_quality_score,
        'tractionScore': traction_score,
        'grade': normalize_grade(raw.get('grade'), deck_quality_score),
    }
