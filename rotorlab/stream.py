"""Feed text streams through a machine chunk by chunk."""
from __future__ import annotations

import logging
from typing import Iterator, TextIO

from rotorlab.machine.alphabet import ALPHABET
from rotorlab.machine.enigma import CipherMachine

logger = logging.getLogger(__name__)


def normalize_text(text: str, *, drop_invalid: bool = False) -> str:
    """Trim and uppercase; optionally drop everything outside A-Z."""
    text = text.strip().upper()
    if drop_invalid:
        text = "".join(ch for ch in text if ch in ALPHABET)
    return text


def encrypt_stream(
    machine: CipherMachine,
    reader: TextIO,
    *,
    chunk_size: int = 4096,
    drop_invalid: bool = False,
) -> Iterator[str]:
    """Yield the enciphered form of each chunk read from ``reader``.

    Each chunk is normalized on its own. The machine keeps its rotor
    positions between chunks; chunks that normalize to nothing are skipped.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    n = 0
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            break
        n += 1
        text = normalize_text(chunk, drop_invalid=drop_invalid)
        logger.debug("chunk %d: %d chars in, %d after normalization", n, len(chunk), len(text))
        if text:
            yield machine.encrypt_message(text)
