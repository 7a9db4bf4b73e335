from __future__ import annotations


class EnvPermError(OSError):
    """Raised when a variable cannot be persisted.

    Every failure (missing home directory, unopenable profile, failed write,
    setx spawn or exit failure, undecodable environment value) surfaces as
    this single error with a descriptive message.
    """
