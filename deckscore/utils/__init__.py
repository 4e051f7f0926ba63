from .json_extractor import extract_json_object, strip_code_fence

__all__ = ['extract_json_object', 'strip_code_fence']
