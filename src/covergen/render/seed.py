"""Seed derivation from bibliographic text."""

from __future__ import annotations

import random

from loguru import logger

RANDOM_SEED_MIN = 2**4
RANDOM_SEED_MAX = 2**32

_default_rng = random.Random()


def derive_seed(
    title: str | None,
    call_number: str | None = None,
    rng: random.Random | None = None,
) -> int:
    """Turn the call number (or the title when it is missing) into a seed.

    The seed is the sum of the UTF-8 byte values of the text. With neither
    text available, a random seed in ``[16, 2**32]`` is drawn from ``rng``.
    """
    source = call_number or title
    if source is not None:
        return sum(source.encode("utf-8", "surrogatepass"))
    seed = (rng or _default_rng).randint(RANDOM_SEED_MIN, RANDOM_SEED_MAX)
    logger.debug(f"No title or call number, using random seed {seed}")
    return seed
