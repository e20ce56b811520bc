"""数据模型。"""

from .category import CategoryNode, render_category_tree
from .graph import CityGraph
from .word import Word

__all__ = ["CategoryNode", "CityGraph", "Word", "render_category_tree"]
