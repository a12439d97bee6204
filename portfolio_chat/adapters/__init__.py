from .base import GenerationBackend
from .gemini import GeminiAdapter, extract_candidate_text

__all__ = ["GenerationBackend", "GeminiAdapter", "extract_candidate_text"]
