"""内置词表与城市数据。"""

from __future__ import annotations

from typing import Tuple

from .models.word import Word

# 词表顺序即位置编号，进程内保持稳定。
WORDS: Tuple[Word, ...] = (
    Word("slaw", "hello", "greetings"),
    Word("roj bash", "good morning", "greetings"),
    Word("choni", "how are you", "greetings"),
    Word("bawk", "father", "family"),
    Word("dayik", "mother", "family"),
    Word("brak", "brother", "family"),
    Word("xoshawistim", "my love", "family"),
    Word("nan", "bread", "food"),
    Word("aw", "water", "food"),
    Word("mast", "yogurt", "food"),
)

ZAKHO = 0
DUHOK = 1
ERBIL = 2
SILEMANI = 3

CITY_NAMES: Tuple[str, ...] = ("Zakho", "Duhok", "Erbil", "Silemani")

# 无向边，按添加顺序
CITY_EDGES: Tuple[Tuple[int, int], ...] = (
    (ZAKHO, DUHOK),
    (DUHOK, ERBIL),
    (ERBIL, SILEMANI),
)
