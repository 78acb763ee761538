"""
Error types raised by the sampler.
"""


class LDAError(Exception):
    """Base class of every error raised by ldasampler."""


class InvalidInputError(LDAError, ValueError):
    """
    The corpus or a hyperparameter cannot be used for fitting.

    Raised eagerly, before any count table is allocated, so a rejected
    configuration never leaves partial state behind.
    """


class StateConsistencyError(LDAError, RuntimeError):
    """
    The sufficient statistics no longer agree with the topic assignments.

    This signals a bug in the sampler (a negative count, an occurrence index
    out of range, a topic drawn outside [0, n_topic)) and is not recoverable:
    the chain must be discarded.
    """
