"""存储层。"""

from __future__ import annotations

from typing import Sequence

from ..config import VocabConfig
from ..models.word import Word
from .in_memory import VocabStore


def create_store(config: VocabConfig, words: Sequence[Word] | None = None) -> VocabStore:
    return VocabStore.build(config, words)


__all__ = ["VocabStore", "create_store"]
