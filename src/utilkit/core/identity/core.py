"""Random identifier generation.

Usage:
    random_id()          # e.g. "x9k2m0"
    random_id(5)         # e.g. "a81zq"

    # Deterministic ids for tests
    generator = RandomIdGenerator(length=8, rng=random.Random(42))
    generator.new_id()
"""

from __future__ import annotations

import random

from utilkit.config import get_settings

_default_rng = random.Random()


def random_id(
    length: int | None = None,
    *,
    rng: random.Random | None = None,
    alphabet: str | None = None,
) -> str:
    """Generate a random id of exactly `length` characters.

    Characters are drawn uniformly from the alphabet. Not suitable for
    secrets: the default source is a non-cryptographic random.Random.

    Args:
        length: Number of characters. Defaults to settings.id_length.
        rng: Random source. Defaults to a module-level random.Random.
        alphabet: Characters to draw from. Defaults to settings.id_alphabet.

    Returns:
        The generated id.

    Raises:
        ValueError: If length is negative or the alphabet is empty.
    """
    settings = get_settings()
    length = settings.id_length if length is None else length
    alphabet = settings.id_alphabet if alphabet is None else alphabet
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if not alphabet:
        raise ValueError("alphabet must contain at least one character")

    source = rng or _default_rng
    return "".join(source.choice(alphabet) for _ in range(length))


class RandomIdGenerator:
    """Id generator with its length, alphabet and random source fixed up front.

    Pass one of these where code needs to mint ids, so tests can swap in a
    seeded random.Random.

    Args:
        length: Number of characters per id. Defaults to settings.id_length.
        alphabet: Characters to draw from. Defaults to settings.id_alphabet.
        rng: Random source. Defaults to a fresh random.Random.
    """

    def __init__(
        self,
        length: int | None = None,
        alphabet: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        settings = get_settings()
        self.length = settings.id_length if length is None else length
        self.alphabet = settings.id_alphabet if alphabet is None else alphabet
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")
        if not self.alphabet:
            raise ValueError("alphabet must contain at least one character")
        self._rng = rng or random.Random()

    def new_id(self) -> str:
        """Generate a new id."""
        return random_id(self.length, rng=self._rng, alphabet=self.alphabet)

    def __call__(self) -> str:
        return self.new_id()
