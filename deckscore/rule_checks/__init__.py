from .rule_checks import (
    BUZZWORD_OVERUSE_THRESHOLD,
    MAX_AVG_WORDS_PER_SLIDE,
    MAX_SLIDES,
    MIN_SLIDES,
    THIN_SLIDE_WORDS,
    find_buzzwords,
    find_missing_sections,
    find_thin_slides,
    has_contact_info,
    has_quantitative_data,
    run_rule_checks,
)

__all__ = [
    'BUZZWORD_OVERUSE_THRESHOLD',
    'MAX_AVG_WORDS_PER_SLIDE',
    'MAX_SLIDES',
    'MIN_SLIDES',
    'THIN_SLIDE_WORDS',
    'find_buzzwords',
    'find_missing_sections',
    'find_thin_slides',
    'has_contact_info',
    'has_quantitative_data',
    'run_rule_checks',
]
