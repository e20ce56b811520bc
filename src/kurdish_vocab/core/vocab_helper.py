"""词汇助手核心：把存储里的四套结构包装成只读操作。"""

from __future__ import annotations

from typing import List, Sequence

from ..config import VocabConfig
from ..logging_config import get_logger
from ..models.category import render_category_tree
from ..models.word import Word
from ..storage import create_store
from .hash_table import NOT_FOUND
from .practice import PracticeSession


class VocabHelper:
    """浏览、练习、查词、分类树、城市连接五个操作的入口。

    所有结构在构造时建好，之后不再修改。
    """

    def __init__(self, config: VocabConfig | None = None, words: Sequence[Word] | None = None) -> None:
        self.config = config or VocabConfig()
        self.logger = get_logger(__name__, self.config)
        self.store = create_store(self.config, words)

    @property
    def words(self) -> Sequence[Word]:
        return self.store.words

    def find_index(self, query: str) -> int:
        """精确匹配查位置，查不到返回 NOT_FOUND。"""

        return self.store.lookup.find(query)

    def look_up(self, query: str) -> Word | None:
        index = self.find_index(query)
        if index == NOT_FOUND:
            self.logger.debug("查词未命中：%r", query)
            return None
        return self.store.words[index]

    def start_practice(self) -> PracticeSession:
        return PracticeSession(self.store.words, quit_input=self.config.quit_input)

    def render_all_words(self) -> str:
        lines = ["", "All Kurdish words:"]
        lines.extend(f"  {word.describe()}" for word in self.store.words)
        return "\n".join(lines) + "\n\n"

    def render_lookup(self, query: str) -> str:
        word = self.look_up(query)
        if word is None:
            return f"Word not found: {query}\n\n"
        return (
            "Found:\n"
            f"  Kurdish: {word.kurdish}\n"
            f"  English: {word.english}\n"
            f"  Category: {word.category}\n\n"
        )

    def category_tree_lines(self) -> List[str]:
        return render_category_tree(self.store.categories)

    def render_category_tree(self) -> str:
        return "\nCategory tree:\n" + "".join(f"{line}\n" for line in self.category_tree_lines()) + "\n"

    def render_connections(self) -> str:
        return self.store.cities.render_connections()
