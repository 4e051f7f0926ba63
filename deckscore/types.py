"""
Type definitions shared across the deck analysis pipeline
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SCHEMA_VERSION = 1
EMPTY_SLIDE_TEXT = '(empty slide)'


def count_words(text: str) -> int:
    return len(text.split())


@dataclass(frozen=True)
class Slide:
    """One page or slide of a deck reduced to plain text"""

    slide_number: int
    raw_text: str
    word_count: int

    @classmethod
    def from_text(cls, slide_number: int, text: str) -> 'Slide':
        cleaned = text.strip()
        return cls(slide_number=slide_number, raw_text=cleaned, word_count=count_words(cleaned))


class DimensionKey(str, Enum):
    PROBLEM = 'problem'
    SOLUTION = 'solution'
    MARKET_SIZE = 'marketSize'
    BUSINESS_MODEL = 'businessModel'
    TRACTION = 'traction'
    TEAM = 'team'
    COMPETITION = 'competition'
    GO_TO_MARKET = 'goToMarket'
    FINANCIALS = 'financials'
    ASK = 'ask'
    STORYTELLING = 'storytelling'
    DESIGN_CLARITY = 'designClarity'


class Grade(str, Enum):
    A_PLUS = 'A+'
    A = 'A'
    A_MINUS = 'A-'
    B_PLUS = 'B+'
    B = 'B'
    B_MINUS = 'B-'
    C_PLUS = 'C+'
    C = 'C'
    C_MINUS = 'C-'
    D = 'D'
    F = 'F'


class Impact(str, Enum):
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON (the stored record shape)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DimensionScore(CamelModel):
    key: DimensionKey
    label: str
    score: int = Field(ge=0, le=10)
    feedback: str = ''


class PriorityImprovement(CamelModel):
    title: str
    description: str = ''
    impact: Impact = Impact.MEDIUM


class ExtractedMetrics(CamelModel):
    revenue: Optional[str] = None
    arr: Optional[str] = None
    growth_rate: Optional[str] = None
    users: Optional[str] = None
    funding_ask: Optional[str] = None
    burn_rate: Optional[str] = None
    cac: Optional[str] = None
    ltv: Optional[str] = None
    team_size: Optional[str] = None
    runway: Optional[str] = None


class SlideBreakdown(CamelModel):
    slide_number: int
    classified_type: str = ''
    summary: str = ''


class RuleCheckResult(CamelModel):
    warnings: List[str] = Field(default_factory=list)
    slide_count: int
    avg_words_per_slide: int
    thin_slides: List[int] = Field(default_factory=list)
    has_buzzword_overuse: bool
    has_contact_info: bool
    has_quantitative_data: bool
    missing_slide_types: List[str] = Field(default_factory=list)


class AIAnalysisResponse(CamelModel):
    dimensions: List[DimensionScore]
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)
    priority_improvements: List[PriorityImprovement] = Field(default_factory=list)
    extracted_metrics: ExtractedMetrics = Field(default_factory=ExtractedMetrics)
    slide_breakdown: List[SlideBreakdown] = Field(default_factory=list)
    summary: str = ''
    deck_quality_score: int = Field(ge=0, le=100)
    traction_score: int = Field(ge=0, le=100)
    grade: Grade


class FullAnalysisResult(AIAnalysisResponse):
    """AI verdict merged with the deterministic rule checks; the persisted unit"""

    rule_checks: RuleCheckResult
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str) -> 'FullAnalysisResult':
        return cls.model_validate_json(data)
