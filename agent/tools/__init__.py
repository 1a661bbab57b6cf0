from agent.tools.errors import DelegateError, ImageSearchError, TextGenerationError
from agent.tools.image_search import ImageSearchClient
from agent.tools.text_generation import TextGenerationClient

__all__ = [
    "DelegateError",
    "ImageSearchClient",
    "ImageSearchError",
    "TextGenerationClient",
    "TextGenerationError",
]
