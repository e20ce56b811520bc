"""词条模型。"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Word:
    """一条翻译记录。

    说明：身份由它在词表中的位置决定，本身不带编号。
    """

    kurdish: str
    english: str
    category: str

    def describe(self) -> str:
        """单行展示：原词 = 释义 [分类]。"""

        return f"{self.kurdish}  =  {self.english}  [{self.category}]"
