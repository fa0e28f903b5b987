from .blocks import DiagramBlock, scan_blocks
from .encoder import encode
from .fetcher import build_diagram_url, fetch_diagram
from .store import DiagramStore, find_diagram_store, get_diagram_store

__all__ = [
    "DiagramBlock",
    "DiagramStore",
    "build_diagram_url",
    "encode",
    "fetch_diagram",
    "find_diagram_store",
    "get_diagram_store",
    "scan_blocks",
]
