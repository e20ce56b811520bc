"""根据原词查询并输出结果。"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from kurdish_vocab.core.vocab_helper import VocabHelper  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="库尔德语查词")
    parser.add_argument("word", nargs="*", help="原词（多个词按空格拼接，如 roj bash）")
    args = parser.parse_args()

    if args.word:
        query_text = " ".join(args.word)
    else:
        query_text = input("Enter a Kurdish word to look up: ")

    if not query_text:
        raise SystemExit("查询词不能为空。")

    print(VocabHelper().render_lookup(query_text), end="")


if __name__ == "__main__":
    main()
