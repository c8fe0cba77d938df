"""LinguaLearner backend: accounts, community posts and the client session layer."""

__version__ = "1.0.0"
