"""Server-side memory.

``MemoryStore`` keeps the taught prompt -> response mapping and mirrors it to
a single pretty-printed JSON file after every change. ``ChatHistory`` is the
in-process log of prompts and responses; it is never persisted.
"""

from __future__ import annotations

import json
import logging
import threading
from collections import deque
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union


logger = logging.getLogger(__name__)


def normalize_prompt(text: str) -> str:
    return text.strip().lower()


class MemoryStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._mapping: Dict[str, str] = {}

    def load(self) -> Dict[str, str]:
        """Read the backing file into memory.

        Fails open: a missing, unreadable or malformed file leaves the store
        with an empty mapping.
        """
        with self._lock:
            self._mapping = self._read()
            return dict(self._mapping)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            logger.info("%s does not exist. Starting with empty memory.", self.path)
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Error loading memory from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            logger.error(
                "Error loading memory from %s: expected an object of strings", self.path
            )
            return {}
        logger.info("Memory loaded successfully: %s entries", len(data))
        return data

    def save(self, mapping: Optional[Dict[str, str]] = None) -> bool:
        """Overwrite the backing file with ``mapping`` (default: current memory).

        Write errors are logged and reported through the return value only.
        """
        with self._lock:
            if mapping is not None:
                self._mapping = dict(mapping)
            return self._write()

    def _write(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._mapping, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error saving memory to %s: %s", self.path, exc)
            return False
        logger.info("Memory saved successfully: %s entries", len(self._mapping))
        return True

    def learn(self, prompt: str, response: str) -> str:
        """Insert or overwrite one pair and persist it. Returns the stored key."""
        key = normalize_prompt(prompt)
        with self._lock:
            self._mapping[key] = response
            self._write()
        return key

    def get(self, key: str) -> Optional[str]:
        return self._mapping.get(key)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._mapping)

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, key: object) -> bool:
        return key in self._mapping


class ChatHistory:
    """Append-only log of ``{"prompt": ...}`` / ``{"response": ...}`` entries.

    ``limit`` turns it into a ring buffer; ``0`` or ``None`` keeps everything.
    Odd limits are rounded up so eviction never splits a prompt/response pair.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit:
            limit += limit % 2
        self._entries: deque = deque(maxlen=limit or None)
        self._lock = threading.Lock()

    def record(self, prompt: str, response: str) -> None:
        with self._lock:
            self._entries.append({"prompt": prompt})
            self._entries.append({"response": response})

    def entries(self) -> List[Dict[str, str]]:
        with self._lock:
            return [dict(entry) for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Dict[str, str]]:
        return iter(self.entries())
