"""在源码目录下直接启动词汇助手菜单。"""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from kurdish_vocab.shell import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
