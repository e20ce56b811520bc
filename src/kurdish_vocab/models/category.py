"""分类树节点。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class CategoryNode:
    """分类树节点。

    子节点直接存放在父节点的列表里，由父节点独占，不保留反向引用。
    """

    name: str
    word_indices: List[int] = field(default_factory=list)
    children: List["CategoryNode"] = field(default_factory=list)

    def add_child(self, child: "CategoryNode") -> "CategoryNode":
        self.children.append(child)
        return child

    def find(self, name: str) -> "CategoryNode | None":
        """先序查找第一个同名节点。"""

        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def all_indices(self) -> List[int]:
        """收集子树内全部词条位置（先序）。"""

        indices = list(self.word_indices)
        for child in self.children:
            indices.extend(child.all_indices())
        return indices


def render_category_tree(node: CategoryNode | None, depth: int = 0) -> List[str]:
    """先序遍历输出节点名，每层缩进两个空格。"""

    if node is None:
        return []
    lines = ["  " * depth + f"- {node.name}"]
    for child in node.children:
        lines.extend(render_category_tree(child, depth + 1))
    return lines
