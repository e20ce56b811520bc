"""内存级存储实现。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..config import VocabConfig
from ..core.hash_table import WordHashTable
from ..core.registry import build_category_tree, build_city_graph, build_lookup_index
from ..data import CITY_EDGES, CITY_NAMES, WORDS
from ..models.category import CategoryNode
from ..models.graph import CityGraph
from ..models.word import Word

logger = logging.getLogger(__name__)


@dataclass
class VocabStore:
    """简单内存存储：词表、查词表、分类树、城市图四套结构。

    启动时一次建好，之后只读。
    """

    words: Tuple[Word, ...]
    lookup: WordHashTable
    categories: CategoryNode
    cities: CityGraph

    @classmethod
    def build(cls, config: VocabConfig, words: Sequence[Word] | None = None) -> "VocabStore":
        word_tuple = tuple(WORDS if words is None else words)
        store = cls(
            words=word_tuple,
            lookup=build_lookup_index(word_tuple, config),
            categories=build_category_tree(
                word_tuple, config.category_root_name, config.category_names
            ),
            cities=build_city_graph(CITY_NAMES, CITY_EDGES),
        )
        logger.debug(
            "词表 %s 条，查词表 %s 键，城市 %s 个",
            len(store.words),
            len(store.lookup),
            len(store.cities),
        )
        return store
