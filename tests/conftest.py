import io
import json

import fitz
import pytest
from pptx import Presentation
from pptx.util import Inches

from deckscore.providers import AIProvider
from deckscore.rubric import DIMENSIONS


class StubProvider(AIProvider):
    """Returns a canned response and records every call"""

    name = 'stub'
    model = 'stub-model'

    def __init__(self, response='', error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def analyze(self, system_prompt, user_content):
        self.calls.append((system_prompt, user_content))
        if self.error is not None:
            raise self.error
        return self.response


def build_pdf(pages):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def build_pptx(slides):
    prs = Presentation()
    blank = prs.slide_layouts[6]
    for text in slides:
        slide = prs.slides.add_slide(blank)
        if text:
            box = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(8), Inches(4))
            box.text_frame.text = text
    buffer = io.BytesIO()
    prs.save(buffer)
    return buffer.getvalue()


def ai_payload(**overrides):
    payload = {
        'dimensions': [
            {'key': d.key.value, 'label': d.label, 'score': 7, 'feedback': f'{d.label} is solid.'} for d in DIMENSIONS
        ],
        'strengths': ['Clear problem statement'],
        'weaknesses': ['Thin financials'],
        'redFlags': [],
        'priorityImprovements': [
            {'title': 'Add unit economics', 'description': 'Show CAC and LTV.', 'impact': 'high'},
        ],
        'extractedMetrics': {'revenue': '$2M', 'growthRate': '30%', 'teamSize': None},
        'slideBreakdown': [
            {'slideNumber': 2, 'classifiedType': 'problem', 'summary': 'The pain point.'},
            {'slideNumber': 1, 'classifiedType': 'title', 'summary': 'Company name.'},
        ],
        'summary': 'A promising early-stage deck.',
        'deckQualityScore': 72,
        'tractionScore': 55,
        'grade': 'B-',
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def ai_response():
    return json.dumps(ai_payload())


@pytest.fixture
def sample_pptx():
    return build_pptx(
        [
            'Acme Robotics',
            'The problem: warehouses lose $2M a year to picking errors and 30% staff churn.',
            'Our solution is a platform that plans picks. Contact founder@acme.io',
        ]
    )
