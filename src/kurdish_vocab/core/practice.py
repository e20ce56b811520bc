"""翻卡练习调度。"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Sequence

from ..models.word import Word


@dataclass
class PracticeCard:
    """一张卡片：正面原词，背面释义与分类。"""

    index: int
    word: Word

    @property
    def front(self) -> str:
        return self.word.kurdish

    @property
    def back(self) -> str:
        return f"{self.word.english}  [{self.word.category}]"


class PracticeSession:
    """按词表顺序先进先出地出卡，每个位置只出现一次。

    开始时一次性入队，不打乱、不重复；退出后剩余卡片直接丢弃。
    """

    def __init__(self, words: Sequence[Word], quit_input: str = "q") -> None:
        self.words = words
        self.quit_input = quit_input
        self.queue: Deque[int] = deque(range(len(words)))
        self.revealed = 0
        self.quit = False

    def __bool__(self) -> bool:
        return bool(self.queue) and not self.quit

    def next_card(self) -> PracticeCard:
        index = self.queue.popleft()
        return PracticeCard(index=index, word=self.words[index])

    def is_quit(self, line: str) -> bool:
        """去掉行尾换行后，与退出指令大小写不敏感地相等。"""

        return line.rstrip("\r\n").lower() == self.quit_input.lower()

    def answer(self, line: str) -> bool:
        """处理一次输入：返回 True 表示翻开卡片，False 表示退出。"""

        if self.is_quit(line):
            self.quit = True
            self.queue.clear()
            return False
        self.revealed += 1
        return True

    @property
    def finished(self) -> bool:
        return not self.queue and not self.quit
