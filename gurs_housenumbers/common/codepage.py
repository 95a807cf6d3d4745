"""Windows-1250 text codec used by the GURS attribute tables.

Decoding never fails: bytes without a mapping in the code page become
U+FFFD, and characters that cannot be encoded become ``?``.
"""

from __future__ import annotations

CODEPAGE = "cp1250"


def decode_windows1250(data: bytes) -> str:
    return data.decode(CODEPAGE, errors="replace")


def encode_windows1250(text: str) -> bytes:
    return text.encode(CODEPAGE, errors="replace")
