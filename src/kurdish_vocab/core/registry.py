"""从内置数据构建查词表、分类树与城市图。"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

from ..config import VocabConfig
from ..models.category import CategoryNode
from ..models.graph import CityGraph
from ..models.word import Word
from .hash_table import WordHashTable

logger = logging.getLogger(__name__)


def build_lookup_index(words: Sequence[Word], config: VocabConfig) -> WordHashTable:
    """按词表顺序插入一次；重复原词以后插入者为准。"""

    table = WordHashTable(
        capacity=config.hash_bucket_count,
        multiplier=config.hash_multiplier,
        word_bits=config.hash_word_bits,
    )
    for index, word in enumerate(words):
        table.insert(word.kurdish, index)
    return table


def build_category_tree(
    words: Sequence[Word],
    root_name: str,
    category_names: Iterable[str],
) -> CategoryNode:
    """按分类名精确匹配分组，挂到同一根节点下。

    分类名不在固定列表里的词条不进树，但仍留在词表中。
    """

    root = CategoryNode(name=root_name)
    leaves = {}
    for name in category_names:
        if name not in leaves:
            leaves[name] = root.add_child(CategoryNode(name=name))
    for index, word in enumerate(words):
        leaf = leaves.get(word.category)
        if leaf is None:
            logger.debug("词条 %s 的分类 %r 不在分类树中", word.kurdish, word.category)
            continue
        leaf.word_indices.append(index)
    return root


def build_city_graph(names: Iterable[str], edges: Iterable[Tuple[int, int]]) -> CityGraph:
    graph = CityGraph(names)
    for a, b in edges:
        graph.add_undirected_edge(a, b)
    return graph
