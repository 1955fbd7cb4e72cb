from __future__ import annotations

import logging
from typing import List, Sequence

from .alphabet import is_symbol
from .errors import EncodingError, InvalidSymbol
from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor, RotorAssembly

logger = logging.getLogger(__name__)


class CipherMachine:
    """Rotor machine: plugboard, rotors, reflector, rotors back, plugboard.

    Encryption and decryption are the same call; to decipher, build a fresh
    machine from the same settings and feed it the ciphertext. The rotor
    positions are the only state and only ever move forward.
    """

    def __init__(self, rotors: Sequence[Rotor], reflector: Reflector, plugboard: Plugboard):
        self.rotors = RotorAssembly(list(rotors))
        self.reflector = reflector
        self.plugboard = plugboard
        logger.debug(
            "machine ready: rotors=%s positions=%s reflector=%s plugs=%d",
            ",".join(r.model_id for r in self.rotors),
            self.rotors.positions,
            reflector.model_id,
            len(plugboard),
        )

    @property
    def positions(self) -> str:
        return self.rotors.positions

    def _substitute(self, c: str) -> str:
        c = self.plugboard.pass_through(c)
        c = self.rotors.forward(c)
        c = self.reflector.encrypt(c)
        c = self.rotors.reverse(c)
        return self.plugboard.pass_through(c)

    def encrypt_char(self, c: str) -> str:
        """One key press: the rotors move first, then the letter is checked."""
        self.rotors.step()
        if not (isinstance(c, str) and len(c) == 1 and is_symbol(c)):
            raise EncodingError(c)
        return self._substitute(c)

    def encrypt_message(self, text: str) -> str:
        out: List[str] = []
        for i, c in enumerate(text):
            try:
                out.append(self.encrypt_char(c))
            except (EncodingError, InvalidSymbol) as exc:
                logger.debug("rejected %r at index %d", c, i)
                raise EncodingError(c, i) from exc
        return "".join(out)

    decrypt_message = encrypt_message

    def __repr__(self) -> str:
        return f"<CipherMachine {self.rotors!r} {self.reflector.model_id} {self.plugboard!r}>"
