"""查词哈希表：原词文本 -> 词表位置。"""

from __future__ import annotations

from typing import List, Tuple

# 查不到时的哨兵值，调用方自行判断
NOT_FOUND = -1


def hash_string(key: str, capacity: int, multiplier: int = 31, word_bits: int = 64) -> int:
    """多项式滚动哈希。

    逐字节（UTF-8）累加 h = h * multiplier + byte，每一步按无符号
    word_bits 位回绕，最后对桶数取模。非 UTF-8 终端读入的坏字节以
    surrogateescape 还原成原始字节参与计算。
    """

    mask = (1 << word_bits) - 1
    h = 0
    for byte in key.encode("utf-8", "surrogateescape"):
        h = (h * multiplier + byte) & mask
    return h % capacity


class WordHashTable:
    """固定桶数的拉链哈希表，不扩容。"""

    def __init__(self, capacity: int = 101, multiplier: int = 31, word_bits: int = 64) -> None:
        if capacity < 1:
            raise ValueError(f"桶数必须为正整数：{capacity}")
        self.capacity = capacity
        self.multiplier = multiplier
        self.word_bits = word_bits
        self.buckets: List[List[Tuple[str, int]]] = [[] for _ in range(capacity)]

    def _bucket_for(self, key: str) -> List[Tuple[str, int]]:
        return self.buckets[hash_string(key, self.capacity, self.multiplier, self.word_bits)]

    def insert(self, key: str, index: int) -> None:
        """插入或覆盖：同键只保留最后一次写入的位置。"""

        bucket = self._bucket_for(key)
        for slot, (existing, _old) in enumerate(bucket):
            if existing == key:
                bucket[slot] = (key, index)
                return
        bucket.append((key, index))

    def find(self, key: str) -> int:
        for existing, index in self._bucket_for(key):
            if existing == key:
                return index
        return NOT_FOUND

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) != NOT_FOUND

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)
