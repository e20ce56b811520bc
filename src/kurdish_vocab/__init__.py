"""库尔德语词汇助手。"""

from .config import VocabConfig
from .core.vocab_helper import VocabHelper

__all__ = ["VocabConfig", "VocabHelper"]
