"""Exception hierarchy for PathTrieLib.

Ordinary missing-data conditions (unknown paths, repeated deletes) are never
errors: lookups return a default, counts return 0 and deletes are no-ops.
Exceptions are reserved for bad input and for broken internal invariants.
"""


class TrieError(Exception):
    """Base class for all PathTrieLib errors."""
    pass


class TrieConfigError(TrieError):
    """Raised when a TrieConfig fails validation."""
    pass


class InvalidKeyError(TrieError, TypeError):
    """Raised when a path contains a key the trie is configured to reject."""

    def __init__(self, key, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid path key {key!r}: {reason}")


class InvalidFillResultError(TrieError, TypeError):
    """Raised when a fill provider returns neither Continue nor STOP."""

    def __init__(self, result, path):
        self.result = result
        self.path = tuple(path)
        super().__init__(
            f"Fill provider must return Continue(value) or STOP, "
            f"got {result!r} at path {self.path!r}"
        )


class TrieInternalError(TrieError):
    """Raised when an internal invariant of the trie is found broken.

    This is a programming error, not a user error: the node linkage or the
    populated-descendant counters are corrupted. Callers are not expected
    to recover from it.
    """
    pass
