"""Errors raised by the Markov chain core."""


class WordChainError(RuntimeError):
    """Base class for every error raised by the chain."""


class CorpusUnreadable(WordChainError):
    """Raised when a corpus file cannot be opened or decoded."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Could not read corpus {path}: {reason}")


class ModelNotBuilt(WordChainError):
    """Raised when sampling is requested before build and cache completed."""


class ModelAlreadyBuilt(WordChainError):
    """Raised when transitions are added to a model that was already cached."""


class EmptyToken(WordChainError):
    """Raised when a table or cursor is asked for a token it does not have."""


class NoTransitionsForState(WordChainError):
    """Raised when a state has no recorded outgoing transitions."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"No transitions recorded for state {token!r}")
