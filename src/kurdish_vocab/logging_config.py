"""日志配置入口。"""

from __future__ import annotations

import logging
import sys

from .config import VocabConfig


def setup_logging(config: VocabConfig | None = None) -> None:
    """配置根日志器。

    日志写到 stderr，stdout 留给菜单与卡片输出。
    """

    config = config or VocabConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str, config: VocabConfig | None = None) -> logging.Logger:
    config = config or VocabConfig()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper()))
    return logger
