"""
Deterministic structural checks over parsed slide text, independent of any AI call
"""

from typing import List, Sequence

from ..types import RuleCheckResult, Slide
from .patterns import BUZZWORDS, CONTACT_PATTERN, CRITICAL_SECTION_KEYWORDS, QUANT_PATTERN

MIN_SLIDES = 8
MAX_SLIDES = 25
MAX_AVG_WORDS_PER_SLIDE = 150
THIN_SLIDE_WORDS = 20
BUZZWORD_OVERUSE_THRESHOLD = 5
MAX_BUZZWORDS_REPORTED = 5


def full_text(slides: Sequence[Slide]) -> str:
    return ' '.join(slide.raw_text.lower() for slide in slides)


def average_words_per_slide(slides: Sequence[Slide]) -> int:
    if not slides:
        return 0
    total = sum(slide.word_count for slide in slides)
    # half-up rounding, not banker's
    return int(total / len(slides) + 0.5)


def find_thin_slides(slides: Sequence[Slide], min_words: int = THIN_SLIDE_WORDS) -> List[int]:
    """Slide numbers under the word threshold; the title slide is exempt"""
    return [slide.slide_number for slide in slides if slide.slide_number > 1 and slide.word_count < min_words]


def find_buzzwords(text: str) -> List[str]:
    return [word for word in BUZZWORDS if word in text]


def has_contact_info(text: str) -> bool:
    return CONTACT_PATTERN.search(text) is not None


def has_quantitative_data(text: str) -> bool:
    return QUANT_PATTERN.search(text) is not None


def find_missing_sections(text: str) -> List[str]:
    return [
        section
        for section, keywords in CRITICAL_SECTION_KEYWORDS.items()
        if not any(keyword in text for keyword in keywords)
    ]


def run_rule_checks(slides: Sequence[Slide]) -> RuleCheckResult:
    warnings: List[str] = []
    slide_count = len(slides)
    avg_words = average_words_per_slide(slides)

    if slide_count < MIN_SLIDES:
        warnings.append(f'Deck has only {slide_count} slides. Most successful decks have 10-15 slides.')
    elif slide_count > MAX_SLIDES:
        warnings.append(f'Deck has {slide_count} slides. Consider trimming to under 20 for better engagement.')

    if avg_words > MAX_AVG_WORDS_PER_SLIDE:
        warnings.append(
            f'Average of {avg_words} words per slide is too high. Aim for under 100 words per slide for readability.'
        )

    thin_slides = find_thin_slides(slides)
    if thin_slides:
        numbers = ', '.join(str(n) for n in thin_slides)
        warnings.append(
            f'Slides {numbers} have very little text content (<{THIN_SLIDE_WORDS} words). '
            'These may be image-heavy or empty.'
        )

    text = full_text(slides)

    buzzwords = find_buzzwords(text)
    buzzword_overuse = len(buzzwords) >= BUZZWORD_OVERUSE_THRESHOLD
    if buzzword_overuse:
        quoted = '", "'.join(buzzwords[:MAX_BUZZWORDS_REPORTED])
        warnings.append(f'High buzzword density detected: "{quoted}". Replace with specific, concrete language.')

    contact_info = has_contact_info(text)
    if not contact_info:
        warnings.append('No contact information detected. Include email or LinkedIn on the last slide.')

    quantitative = has_quantitative_data(text)
    if not quantitative:
        warnings.append(
            'No quantitative data (numbers, percentages, dollar amounts) detected. VCs expect data-driven decks.'
        )

    missing = find_missing_sections(text)
    if missing:
        warnings.append(
            f'Potentially missing sections: {", ".join(missing)}. These are expected in most investor decks.'
        )

    return RuleCheckResult(
        warnings=warnings,
        slide_count=slide_count,
        avg_words_per_slide=avg_words,
        thin_slides=thin_slides,
        has_buzzword_overuse=buzzword_overuse,
        has_contact_info=contact_info,
        has_quantitative_data=quantitative,
        missing_slide_types=missing,
    )
