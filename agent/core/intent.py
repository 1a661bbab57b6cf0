from __future__ import annotations

from agent.core.prompt import IDENTITY_QUESTION, IMAGE_KEYWORDS


def is_image_related(prompt: str) -> bool:
    # Plain substring containment: "images" also matches via "image".
    return any(keyword in prompt for keyword in IMAGE_KEYWORDS)


def is_identity_question(prompt: str) -> bool:
    return prompt == IDENTITY_QUESTION
