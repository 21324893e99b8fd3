"""Identifier generation for tasks and notes.

Identifiers are opaque collection keys, never a security boundary.
A UUID4 from the operating system's secure random source is preferred;
when that source is unavailable the generator falls back to two
pseudo-random base-36 strings joined together.

The source is picked once, when the generator is built, so callers only
ever see a plain ``generate() -> str``.
"""

import logging
import os
import random
import string
import uuid

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase
WEAK_PART_LENGTH = 13


def secure_random_available() -> bool:
    """Check whether the OS secure random source works."""
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


def random_base36(rng: random.Random, length: int = WEAK_PART_LENGTH) -> str:
    """Return a pseudo-random base-36 string of the given length."""
    return "".join(rng.choice(BASE36_ALPHABET) for _ in range(length))


class IdGenerator:
    """Produces identifiers unique with overwhelming probability.

    Example:
        new_id = IdGenerator()
        task_id = new_id()  # "0f8fad5b-d9cb-469f-a165-70867728950e"
    """

    def __init__(self, secure: bool | None = None, rng: random.Random | None = None) -> None:
        """Initialize the generator.

        Args:
            secure: Force the source. None probes the OS and prefers UUID4.
            rng: Random instance for the fallback source.
        """
        if secure is None:
            secure = secure_random_available()
        if not secure:
            logger.warning("Secure random source unavailable, using pseudo-random ids")
        self._secure = secure
        self._rng = rng or random.Random()

    @property
    def is_secure(self) -> bool:
        """True if ids come from the secure UUID4 source."""
        return self._secure

    def __call__(self) -> str:
        if self._secure:
            return str(uuid.uuid4())
        return random_base36(self._rng) + random_base36(self._rng)
