"""A read-only terminal text viewer with cursor movement."""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

TITLE = "Welcome to Super text viewer"

_SEQUENCE_KEYS = {
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_BACKSPACE": "backspace",
}
_CTRL_Q = "\x11"


@dataclass
class Coordinates:
    """A 1-based column (x) and row (y) pair."""

    x: int
    y: int


@dataclass
class TextViewer:
    """A loaded document together with cursor and terminal geometry."""

    lines: list[str]
    cur_pos: Coordinates
    terminal_size: Coordinates
    file_name: str
    _running: bool = field(default=True, repr=False)

    @property
    def doc_length(self) -> int:
        """Number of lines in the document."""
        return len(self.lines)

    def visible_lines(self) -> list[str]:
        """Return the lines that fit on screen around the cursor row."""
        rows = self.terminal_size.y
        if self.doc_length < rows:
            return list(self.lines)
        window = rows - 3
        if self.cur_pos.y <= rows:
            return self.lines[:window]
        return self.lines[self.cur_pos.y - window : self.cur_pos.y]

    def status_line(self) -> str:
        """Return the status bar text."""
        return (
            f"X={self.cur_pos.x},Y={self.cur_pos.y}, "
            f"line-count={self.doc_length} Filename: {self.file_name}"
        )

    def set_pos(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and row ``y``."""
        self.cur_pos.x = x
        self.cur_pos.y = y

    def inc_x(self) -> None:
        """Move right, stopping at the terminal's last column."""
        if self.cur_pos.x < self.terminal_size.x:
            self.cur_pos.x += 1

    def dec_x(self) -> None:
        """Move left, stopping at the first column."""
        if self.cur_pos.x > 1:
            self.cur_pos.x -= 1

    def inc_y(self) -> None:
        """Move down, stopping at the document's last line."""
        if self.cur_pos.y < self.doc_length:
            self.cur_pos.y += 1

    def dec_y(self) -> None:
        """Move up, stopping at the first line."""
        if self.cur_pos.y > 1:
            self.cur_pos.y -= 1

    def handle_key(self, key: str) -> bool:
        """Apply a named key press; return False when the viewer should quit.

        Recognised names are ``ctrl-q``, ``left``, ``right``, ``up``, ``down``
        and ``backspace``; anything else is ignored.
        """
        actions = {
            "left": self.dec_x,
            "right": self.inc_x,
            "up": self.dec_y,
            "down": self.inc_y,
            "backspace": self.dec_x,
        }
        if key == "ctrl-q":
            return False
        action = actions.get(key)
        if action is not None:
            action()
        return True

    def _render(self, terminal) -> None:
        out = [terminal.home + terminal.clear]
        out.append(terminal.white_on_black(TITLE) + "\r\n")
        out.extend(f"{line}\r\n" for line in self.visible_lines())
        out.append(terminal.move_xy(0, max(self.terminal_size.y - 2, 0)))
        out.append(terminal.bold_red(self.status_line()))
        out.append(terminal.move_xy(self.cur_pos.x - 1, self.cur_pos.y - 1))
        sys.stdout.write("".join(out))
        sys.stdout.flush()

    def run(self, terminal) -> None:
        """Show the document and process key presses until Ctrl-Q."""
        with terminal.raw():
            self._render(terminal)
            while True:
                name = _key_name(terminal.inkey())
                if name is None:
                    continue
                if not self.handle_key(name):
                    break
                self._render(terminal)


def _key_name(keystroke) -> Optional[str]:
    if getattr(keystroke, "is_sequence", False):
        return _SEQUENCE_KEYS.get(keystroke.name)
    text = str(keystroke)
    if text == _CTRL_Q:
        return "ctrl-q"
    if text in ("\x7f", "\x08"):
        return "backspace"
    return None


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def load_viewer(
    file_name: Union[str, Path],
    terminal_size: Optional[Union[Coordinates, tuple[int, int]]] = None,
) -> TextViewer:
    """Read a file into a viewer with the cursor on its last line.

    ``terminal_size`` is (columns, rows); it defaults to the current terminal.
    An empty file is shown as a single empty line.
    """
    lines = _split_lines(Path(file_name).read_text(encoding="utf-8"))
    if not lines:
        lines.append("")
    if terminal_size is None:
        size = shutil.get_terminal_size()
        terminal_size = Coordinates(size.columns, size.lines)
    elif not isinstance(terminal_size, Coordinates):
        terminal_size = Coordinates(*terminal_size)
    return TextViewer(
        lines=lines,
        cur_pos=Coordinates(1, len(lines)),
        terminal_size=terminal_size,
        file_name=str(file_name),
    )


def main(argv=None) -> int:
    """View the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Please provide file name as argument")
        return 0
    if not Path(args[0]).exists():
        print("File does not exist")
        return 0
    from blessed import Terminal

    terminal = Terminal()
    viewer = load_viewer(args[0], Coordinates(terminal.width, terminal.height))
    viewer.set_pos(1, 1)
    viewer.run(terminal)
    return 0


if __name__ == "__main__":
    sys.exit(main())