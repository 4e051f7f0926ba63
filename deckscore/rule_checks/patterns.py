"""
English heuristics for the structural rule checks:
- filler/hype vocabulary (BUZZWORDS)
- keywords that signal each section investors expect (CRITICAL_SECTION_KEYWORDS)
- contact details and quantitative data (CONTACT_PATTERN, QUANT_PATTERN)

All matching runs on the lower-cased text of the whole deck.
"""

import re

BUZZWORDS = [
    'synergy',
    'disrupt',
    'revolutionary',
    'game-changing',
    'world-class',
    'best-in-class',
    'paradigm',
    'leverage',
    'scalable',
    'innovative',
    'cutting-edge',
    'next-generation',
    'bleeding-edge',
    'first-mover',
    'unicorn',
    'moonshot',
    'pivot',
    'ecosystem',
]

# Substring match; stems like 'monetiz' and 'compet' are intentional
CRITICAL_SECTION_KEYWORDS = {
    'Problem': ['problem', 'pain', 'challenge', 'issue', 'gap'],
    'Solution': ['solution', 'product', 'platform', 'how it works', 'our approach'],
    'Market Size': ['market', 'tam', 'sam', 'som', 'addressable', 'billion', 'trillion'],
    'Business Model': ['business model', 'revenue', 'pricing', 'monetiz', 'unit economics'],
    'Traction': ['traction', 'metrics', 'growth', 'users', 'revenue', 'customers', 'mrr', 'arr'],
    'Team': ['team', 'founder', 'co-founder', 'ceo', 'cto', 'experience'],
    'Competition': ['compet', 'landscape', 'vs', 'alternative', 'differenti'],
    'Ask': ['ask', 'raise', 'funding', 'investment', 'use of funds', 'seeking', 'round'],
}

CONTACT_PATTERN = re.compile(
    r'([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})'
    r'|(\+?\d[\d\s()-]{7,})'
    r'|((https?://)?(www\.)?linkedin\.com)',
    re.IGNORECASE,
)

QUANT_PATTERN = re.compile(r'(\$[\d,.]+[KMBkmb]?)|(\d+%)|(\d+[xX]\s)|(\d{1,3}(,\d{3})+)')
