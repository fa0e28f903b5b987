# wiki/markdown/plantuml/encoder.py
"""
PlantUML text encoding for diagram server URLs.

The server expects the diagram source deflated and written in its own base64
alphabet, which is URL-safe without percent-escaping:

    source  →  zlib, header/checksum stripped  →  base64  →  PlantUML alphabet
"""

import base64
import zlib

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PLANTUML_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_"

_TRANSLATION = dict(zip(BASE64_ALPHABET, PLANTUML_ALPHABET))


def transliterate(data: str) -> str:
    """
    Map standard base64 characters onto the PlantUML alphabet.

    Characters outside the standard alphabet (the "=" padding) are dropped.
    """
    return "".join(_TRANSLATION[char] for char in data if char in _TRANSLATION)


def encode(source: str) -> str:
    """Encode diagram source into the token used in the server URL path."""
    compressed = zlib.compress(source.encode("utf-8"))

    # Keep only the raw deflate stream: 2-byte zlib header, 4-byte adler32 trailer
    deflated = compressed[2:-4]

    encoded = base64.b64encode(deflated).decode("ascii")
    return transliterate(encoded)
