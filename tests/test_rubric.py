from deckscore.rubric import DIMENSIONS, build_system_prompt, build_user_prompt
from deckscore.types import DimensionKey, Slide


def test_rubric_covers_every_dimension_once():
    assert [d.key for d in DIMENSIONS] == list(DimensionKey)
    assert len({d.label for d in DIMENSIONS}) == 12


def test_system_prompt_names_all_dimension_keys():
    prompt = build_system_prompt()

    for dimension in DIMENSIONS:
        assert dimension.key.value in prompt
        assert dimension.label in prompt
    assert 'A+ (95-100)' in prompt
    assert 'deckQualityScore' in prompt


def test_user_prompt_lists_slides_with_word_counts():
    slides = [Slide.from_text(1, 'Acme Robotics'), Slide.from_text(2, 'We fix picking errors')]

    prompt = build_user_prompt(slides)

    assert prompt == (
        'Please analyze the following pitch deck (2 slides):\n\n'
        '=== SLIDE 1 (2 words) ===\nAcme Robotics\n\n'
        '=== SLIDE 2 (4 words) ===\nWe fix picking errors\n\n'
        'Respond with the JSON analysis only.'
    )
