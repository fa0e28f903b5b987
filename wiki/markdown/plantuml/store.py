# wiki/markdown/plantuml/store.py
"""
Placeholder table for PlantUML blocks.

Pandoc would mangle diagram source, so the preprocessor lifts every
```plantuml / ~~~plantuml block out of the markdown, renders it, and leaves
an HTML comment placeholder behind:

    before                          before
    ```plantuml                     <!-- PLANTUML_BLOCK_0 -->
    A->B: hi              →         after
    ```
    after

Pandoc passes the comment through untouched; the postprocessor then swaps
each placeholder for its stored fragment.

One DiagramStore lives in each render context, so concurrent renders never
share a table.
"""

from __future__ import annotations

import logging
import re
import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from django.db import connections

from ..config import get_plantuml_config
from .blocks import DEFAULT_LANGUAGE, DiagramBlock, scan_blocks
from .fetcher import fetch_diagram
from .html import error_paragraph

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "PLANTUML_BLOCK"
CONTAINER_CLASS = "plantuml"

_PLACEHOLDER_RE = re.compile(r"<!-- (" + PLACEHOLDER_PREFIX + r"_\d+) -->")

_CONTEXT_KEY = "__plantuml_store"


def placeholder_token(index: int) -> str:
    return f"{PLACEHOLDER_PREFIX}_{index}"


def placeholder_comment(token: str) -> str:
    return f"<!-- {token} -->"


def wrap_fragment(markup: str) -> str:
    return f'<div class="{CONTAINER_CLASS}">{markup}</div>'


class DiagramStore:
    """
    Maps placeholder tokens to rendered diagram fragments.

    ``extract`` resets and fills the table, ``restore`` reads it; both hold
    the store lock while touching the table so a store that does end up
    shared is never reset in the middle of a restore. Diagram fetches run
    outside the lock.

    Lenient cases (unterminated blocks, placeholders missing from the
    rendered html) do not raise; they are recorded in ``warnings``.
    """

    def __init__(
        self,
        config=None,
        fetch: Optional[Callable] = None,
        dark: Optional[bool] = None,
        language: str = DEFAULT_LANGUAGE,
    ):
        self.config = config
        self.fetch = fetch or fetch_diagram
        self.dark = dark
        self.language = language
        self.warnings: List[str] = []
        self._fragments: "OrderedDict[str, str]" = OrderedDict()
        self._counter = 0
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._fragments)

    def __contains__(self, token):
        return token in self._fragments

    def __getitem__(self, token):
        return self._fragments[token]

    @property
    def fragments(self) -> List[str]:
        """Stored fragments in document order."""
        with self._lock:
            return list(self._fragments.values())

    def _render(self, block: DiagramBlock, config, dark: bool) -> str:
        try:
            markup = self.fetch(block.source, config, dark)
        except Exception as e:
            # Custom fetch callables may raise; the document still renders
            logger.exception("PlantUML block at line %s failed to render", block.start_line)
            markup = error_paragraph("Error rendering PlantUML diagram", e)
        return wrap_fragment(markup)

    def _render_in_worker(self, block: DiagramBlock, config, dark: bool) -> str:
        try:
            return self._render(block, config, dark)
        finally:
            # Pool threads die with the executor; a database cache backend
            # would otherwise leave their connections open
            connections.close_all()

    def _render_all(self, blocks: List[DiagramBlock], config, dark: bool) -> List[str]:
        if not blocks:
            return []

        workers = min(config.max_workers, len(blocks))
        if workers <= 1:
            return [self._render(block, config, dark) for block in blocks]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda block: self._render_in_worker(block, config, dark), blocks))

    def extract(self, markdown: str) -> str:
        """
        Replace every diagram block with a placeholder comment line.

        Returns the markdown to hand to the converter. The table is reset
        and then holds one wrapped fragment per block.
        """
        config = self.config or get_plantuml_config()
        dark = config.dark if self.dark is None else self.dark

        segments, blocks = scan_blocks(markdown, self.language)
        rendered = self._render_all(blocks, config, dark)

        with self._lock:
            self._fragments = OrderedDict()
            self._counter = 0
            self.warnings = []

            pending = iter(rendered)
            result = []
            for segment in segments:
                if isinstance(segment, str):
                    result.append(segment)
                    continue

                token = placeholder_token(self._counter)
                self._counter += 1
                self._fragments[token] = next(pending)
                result.append(placeholder_comment(token))

                if not segment.terminated:
                    message = f"unterminated {self.language} block starting at line {segment.start_line}"
                    self.warnings.append(message)
                    logger.warning(message)

        return "\n".join(result)

    def restore(self, html: str) -> str:
        """
        Swap each placeholder comment in html for its stored fragment.

        Only the first occurrence of a token is replaced. Placeholders this
        store does not know are left as they are.
        """
        with self._lock:
            if not self._fragments:
                return html

            restored = set()

            def replace(match):
                token = match.group(1)
                if token in restored or token not in self._fragments:
                    return match.group(0)
                restored.add(token)
                return self._fragments[token]

            result = _PLACEHOLDER_RE.sub(replace, html)

            for token in self._fragments:
                if token not in restored:
                    message = f"placeholder {token} missing from rendered html"
                    self.warnings.append(message)
                    logger.warning(message)

        return result


def get_diagram_store(context: dict, **kwargs) -> DiagramStore:
    """Return the DiagramStore for this render, creating it on first use."""
    store = context.get(_CONTEXT_KEY)
    if store is None:
        store = DiagramStore(**kwargs)
        context[_CONTEXT_KEY] = store
    return store


def find_diagram_store(context: dict) -> Optional[DiagramStore]:
    return context.get(_CONTEXT_KEY)
