from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from agent.core import prompt as texts
from agent.core.intent import is_identity_question, is_image_related
from agent.core.matcher import FuzzyMatcher
from agent.core.memory import ChatHistory, MemoryStore, normalize_prompt
from agent.tools import (
    DelegateError,
    ImageSearchClient,
    TextGenerationClient,
)
from config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


class InvalidTeachRequest(ValueError):
    """A teach request is missing its prompt or its response."""


@dataclass(frozen=True)
class Answer:
    text: str
    # one of: empty, identity, image, memory, generated, error
    source: str


class Assistant:
    """Answers prompts from taught memory, falling back to the external APIs.

    All mutable state (memory, history) lives on the instance so several
    assistants can coexist, e.g. one per test.
    """

    def __init__(
        self,
        memory: MemoryStore,
        history: ChatHistory,
        matcher: FuzzyMatcher,
        images: ImageSearchClient,
        generator: TextGenerationClient,
        max_images: int = 10,
    ) -> None:
        self.memory = memory
        self.history = history
        self.matcher = matcher
        self.images = images
        self.generator = generator
        self.max_images = max_images

    def ask(self, raw_prompt: Optional[str]) -> Answer:
        user_prompt = normalize_prompt(raw_prompt or "")
        logger.info("Received prompt: %r", user_prompt)

        if not user_prompt:
            return Answer(texts.EMPTY_PROMPT_MESSAGE, "empty")

        answer = self._answer(user_prompt)
        self.history.record(user_prompt, answer.text)
        logger.info("Answered %r from %s", user_prompt, answer.source)
        return answer

    def _answer(self, user_prompt: str) -> Answer:
        if is_identity_question(user_prompt):
            return Answer(texts.CREATOR_ATTRIBUTION, "identity")

        if is_image_related(user_prompt):
            return self._search_images(user_prompt)

        similar = self.matcher.find(user_prompt, self.memory.keys())
        if similar is not None:
            response = self.memory.get(similar)
            if response is not None:
                logger.info("Found response for %r via %r", user_prompt, similar)
                return Answer(response, "memory")

        logger.info("Response not found in memory for prompt: %r", user_prompt)
        return self._generate(user_prompt)

    def _search_images(self, query: str) -> Answer:
        try:
            urls = self.images.search(query)
        except DelegateError as exc:
            logger.warning("Error fetching images for %r: %s", query, exc)
            return Answer(texts.images_failed_message(query, str(exc)), "error")
        return Answer(texts.images_found_message(query, urls[: self.max_images]), "image")

    def _generate(self, user_prompt: str) -> Answer:
        try:
            generated = self.generator.generate(user_prompt)
        except DelegateError as exc:
            logger.warning("Error querying text generation API: %s", exc)
            return Answer(texts.GENERATION_FAILED_MESSAGE, "error")

        self.memory.learn(user_prompt, generated)
        logger.info("Learned from external API: %r -> %r", user_prompt, generated)
        return Answer(generated, "generated")

    def teach(self, prompt: Any, response: Any) -> str:
        if not _is_filled(prompt) or not _is_filled(response):
            raise InvalidTeachRequest(texts.INVALID_TEACH_MESSAGE)

        key = self.memory.learn(prompt, response.strip())
        logger.info("Learned: %r -> %r", key, response)
        return texts.learned_message(prompt, response)

    def get_history(self) -> List[Dict[str, str]]:
        return self.history.entries()

    def get_memory(self) -> Dict[str, str]:
        return self.memory.snapshot()


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def build_assistant(settings: Optional[Settings] = None) -> Assistant:
    settings = settings or get_settings()

    memory = MemoryStore(settings.memory_file)
    memory.load()

    return Assistant(
        memory=memory,
        history=ChatHistory(limit=settings.history_limit),
        matcher=FuzzyMatcher(threshold=settings.match_threshold),
        images=ImageSearchClient(settings.image_api_url, timeout=settings.http_timeout),
        generator=TextGenerationClient(settings.text_api_url, timeout=settings.http_timeout),
        max_images=settings.max_images,
    )
