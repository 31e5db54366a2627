"""
Line-preserving text chunking with overlap.

Used to cut documents into pieces for similarity indexing: lines are kept
whole and consecutive chunks share a tail of ``overlap`` characters.
"""
from __future__ import annotations

import logging

from algokit import config

logger = logging.getLogger(__name__)


def chunk_text(text: str, chunk_size: int = config.CHUNK_SIZE, overlap: int = config.CHUNK_OVERLAP) -> list[str]:
    """
    Split `text` into chunks of roughly `chunk_size` characters.

    A line is appended to the current chunk while the chunk stays within
    `chunk_size`. When it would not (and the chunk is non-empty) the chunk is
    emitted and the next one starts with its last `overlap` characters. A
    single line longer than `chunk_size` becomes an oversized chunk rather
    than being split.

    Args:
        text: Input text.
        chunk_size: Target chunk length in characters.
        overlap: Characters carried over between consecutive chunks.

    Raises:
        ValueError: If `chunk_size` is not positive or `overlap` is negative
            or not smaller than `chunk_size`.

    Returns:
        Stripped, non-blank chunks in document order.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}.")
    if not 0 <= overlap < chunk_size:
        raise ValueError(f"overlap must be in [0, {chunk_size}), got {overlap}.")

    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        if current and len(current) + len(line) > chunk_size:
            chunks.append(current.strip())
            tail = current[max(0, len(current) - overlap):] if overlap else ""
            current = f"{tail}\n{line}" if tail else line
        else:
            current = f"{current}\n{line}" if current else line

    if current.strip():
        chunks.append(current.strip())

    chunks = [c for c in chunks if c]
    logger.debug(f"Split {len(text)} characters into {len(chunks)} chunks.")
    return chunks
