from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

BACKTICK_FENCE = "```"
TILDE_FENCE = "~~~"
FENCES = (BACKTICK_FENCE, TILDE_FENCE)

DEFAULT_LANGUAGE = "plantuml"


@dataclass
class DiagramBlock:
    """A fenced diagram block found while scanning markdown."""

    fence: str
    start_line: int
    lines: List[str] = field(default_factory=list)
    terminated: bool = False

    @property
    def source(self) -> str:
        return "\n".join(self.lines)


Segment = Union[str, DiagramBlock]


def scan_blocks(markdown: str, language: str = DEFAULT_LANGUAGE) -> Tuple[List[Segment], List[DiagramBlock]]:
    """
    Split markdown into pass-through lines and fenced diagram blocks.

    An opening fence is a line that, stripped, is exactly ```plantuml or
    ~~~plantuml. The block runs until a bare fence of the same family; the
    fence lines themselves are dropped. A block still open at end of input is
    kept with ``terminated=False``.

    Returns:
        (segments, blocks): segments is the document in order, each entry
        either an untouched line or the DiagramBlock that replaces its lines.
    """
    openers = {f"{fence}{language}": fence for fence in FENCES}

    segments: List[Segment] = []
    blocks: List[DiagramBlock] = []
    current = None

    for number, line in enumerate(markdown.split("\n"), start=1):
        trimmed = line.strip()

        if current is None:
            fence = openers.get(trimmed)
            if fence is None:
                segments.append(line)
                continue
            current = DiagramBlock(fence=fence, start_line=number)
            segments.append(current)
            blocks.append(current)
            continue

        if trimmed == current.fence:
            current.terminated = True
            current = None
            continue

        current.lines.append(line)

    return segments, blocks
