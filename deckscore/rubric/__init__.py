from .rubric import DIMENSION_LABELS, DIMENSIONS, DimensionDefinition, build_system_prompt, build_user_prompt

__all__ = ['DIMENSION_LABELS', 'DIMENSIONS', 'DimensionDefinition', 'build_system_prompt', 'build_user_prompt']
