"""城市连接图（邻接表）。"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)


class CityGraph:
    """无向图：只管城市之间的路。"""

    def __init__(self, names: Iterable[str]) -> None:
        self.city_names: Tuple[str, ...] = tuple(names)
        self.adjacency: List[List[int]] = [[] for _ in self.city_names]

    def __len__(self) -> int:
        return len(self.city_names)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.city_names)

    def add_undirected_edge(self, a: int, b: int) -> None:
        """新增一条无向边。

        越界的端点直接忽略，不抛异常；不去重，也不拦自环。
        """

        if not (self._in_range(a) and self._in_range(b)):
            logger.debug("忽略越界的边 (%s, %s)，节点数 %s", a, b, len(self.city_names))
            return
        self.adjacency[a].append(b)
        self.adjacency[b].append(a)

    def neighbors(self, index: int) -> List[str]:
        """按插入顺序返回邻居名称。"""

        return [self.city_names[other] for other in self.adjacency[index]]

    def render_connections(self) -> str:
        lines = ["", "Kurdish city connections:"]
        for index, name in enumerate(self.city_names):
            lines.append(f"  {name}: " + ", ".join(self.neighbors(index)))
        return "\n".join(lines) + "\n\n"
