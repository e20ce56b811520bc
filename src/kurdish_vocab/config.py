"""全局配置与默认参数。"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class VocabConfig:
    """系统可调参数集合。

    注意：词表、分类与城市都是内置常量，这里只放结构参数。
    """

    # 查词哈希表的桶数：固定，不扩容
    hash_bucket_count: int = 101
    # 多项式滚动哈希的乘数
    hash_multiplier: int = 31
    # 哈希累加按无符号 64 位回绕
    hash_word_bits: int = 64
    # 分类树根节点名称
    category_root_name: str = "Kurdish vocabulary"
    # 固定的三个分类叶子，顺序即挂载顺序
    category_names: Tuple[str, ...] = ("greetings", "family", "food")
    # 练习模式退出指令（大小写不敏感）
    quit_input: str = "q"
    # 日志级别：默认只输出警告，避免干扰交互界面
    log_level: str = "WARNING"
