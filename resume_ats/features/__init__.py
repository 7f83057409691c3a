from .highlight import highlight_segments
from .keywords import (
    DEFAULT_PHRASE_SIZES,
    STOP_WORDS,
    extract_keywords,
    extract_phrases,
    is_keyword_candidate,
    keyword_terms,
    phrase_terms,
)
from .resume_text import coerce_resume, project_resume_text

__all__ = [
    "STOP_WORDS",
    "DEFAULT_PHRASE_SIZES",
    "is_keyword_candidate",
    "keyword_terms",
    "phrase_terms",
    "extract_keywords",
    "extract_phrases",
    "coerce_resume",
    "project_resume_text",
    "highlight_segments",
]
