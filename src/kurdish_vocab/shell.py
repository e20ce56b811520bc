"""交互式菜单：读一个数字，分派到五个只读操作之一，然后回到菜单。"""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import TextIO

from .config import VocabConfig
from .core.vocab_helper import VocabHelper
from .logging_config import get_logger, setup_logging

MENU = (
    "==============================\n"
    "  Kurdish Vocab Helper\n"
    "==============================\n"
    "1. View all words\n"
    "2. Practice words in order\n"
    "3. Look up a word\n"
    "4. Show category tree\n"
    "5. Show city connections\n"
    "0. Exit\n"
    "Choose an option: "
)
INVALID_INPUT = "\nInvalid input. Please enter a number.\n\n"
INVALID_OPTION = "\nInvalid option. Try again.\n\n"
FAREWELL = "\nGoodbye, spas.\n"

# 只认 ASCII 数字开头的整数前缀，其余部分随整行丢弃
CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")


class ShellState(str, Enum):
    """菜单循环的状态。"""

    menu_display = "menu_display"
    awaiting_choice = "awaiting_choice"
    dispatch = "dispatch"
    exit = "exit"


class EndOfInput(Exception):
    """输入流已读完。"""


class VocabShell:
    """菜单状态机。

    输入输出流可注入，便于测试；默认使用标准输入输出。
    """

    def __init__(
        self,
        helper: VocabHelper | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.helper = helper or VocabHelper()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.logger = get_logger(__name__, self.helper.config)
        self.state = ShellState.menu_display
        self.choice: int | None = None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """读一行并去掉行尾换行；读到结尾抛 EndOfInput。"""

        line = self.stdin.readline()
        if not line:
            raise EndOfInput
        return line.rstrip("\r\n")

    def read_token(self) -> str:
        """跳过空行，取第一行非空内容的第一个词；同一行的剩余部分丢弃。"""

        while True:
            tokens = self.read_line().split()
            if tokens:
                return tokens[0]

    def run(self) -> int:
        while self.state != ShellState.exit:
            self.step()
        return 0

    def step(self) -> None:
        if self.state == ShellState.menu_display:
            self.write(MENU)
            self.state = ShellState.awaiting_choice
        elif self.state == ShellState.awaiting_choice:
            self._await_choice()
        elif self.state == ShellState.dispatch:
            self._dispatch()

    def _await_choice(self) -> None:
        try:
            token = self.read_token()
        except EndOfInput:
            self.write(FAREWELL)
            self.state = ShellState.exit
            return
        match = CHOICE_PATTERN.match(token)
        if match is None:
            self.logger.debug("非数字菜单输入：%r", token)
            self.write(INVALID_INPUT)
            self.state = ShellState.menu_display
            return
        self.choice = int(match.group())
        self.state = ShellState.dispatch

    def _dispatch(self) -> None:
        choice = self.choice
        self.choice = None
        self.state = ShellState.menu_display
        if choice == 1:
            self.write(self.helper.render_all_words())
        elif choice == 2:
            self.practice()
        elif choice == 3:
            self.look_up()
        elif choice == 4:
            self.write(self.helper.render_category_tree())
        elif choice == 5:
            self.write(self.helper.render_connections())
        elif choice == 0:
            self.write(FAREWELL)
            self.state = ShellState.exit
        else:
            self.write(INVALID_OPTION)

    def practice(self) -> None:
        """翻卡练习：输入 q/Q 立即退出，其余任意输入（含空行）翻开卡片。"""

        session = self.helper.start_practice()
        if not session:
            self.write("\nNo words to practice.\n\n")
            return
        self.write("\nPractice mode. Press Enter to flip each card. Type q and Enter to quit.\n\n")
        while session:
            card = session.next_card()
            self.write(f"Kurdish: {card.front}\n")
            self.write("[Press Enter to see meaning, or q then Enter to quit]: ")
            try:
                line = self.read_line()
            except EndOfInput:
                # 输入结束按退出处理
                line = self.helper.config.quit_input
            if not session.answer(line):
                self.logger.debug("练习中途退出，已翻开 %s 张", session.revealed)
                self.write("\nExiting practice mode.\n\n")
                return
            self.write(f"  English: {card.back}\n\n")
        if session.finished:
            self.write("You reached the end of the practice list.\n\n")

    def look_up(self) -> None:
        self.write("\nEnter a Kurdish word to look up: ")
        try:
            query = self.read_line()
        except EndOfInput:
            return
        self.write(self.helper.render_lookup(query))


def main() -> int:
    config = VocabConfig()
    setup_logging(config)
    shell = VocabShell(VocabHelper(config))
    try:
        return shell.run()
    except KeyboardInterrupt:
        shell.write(FAREWELL)
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
