"""Fixed texts the assistant answers with."""

from typing import Sequence


EMPTY_PROMPT_MESSAGE = "Please provide a prompt."

IDENTITY_QUESTION = "who created you?"
CREATOR_ATTRIBUTION = "I'm the one who created her. My name is Hassan."

GENERATION_FAILED_MESSAGE = "404 Error ❗"

INVALID_TEACH_MESSAGE = "Invalid data format. Provide both 'prompt' and 'response'."

IMAGE_KEYWORDS = ("image", "images", "picture", "pictures", "photo", "photos")


def images_found_message(query: str, urls: Sequence[str]) -> str:
    return f"Here are some images of {query}: \n" + "\n".join(urls)


def images_failed_message(query: str, reason: str) -> str:
    return f"Error fetching images for {query}: {reason}"


def learned_message(prompt: str, response: str) -> str:
    return f'Learned: "{prompt}" -> "{response}"'
