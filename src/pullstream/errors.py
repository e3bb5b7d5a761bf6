"""
Exceptions raised by ``pullstream``.

Errors raised by user-supplied callables (mappers, predicates, combiners, ...)
are never wrapped; they propagate unchanged to the caller of the terminal
operation. The classes here cover problems detected by the engine itself.
"""


class StreamError(Exception):
    pass


class ConfigurationError(StreamError):
    """
    Raised immediately while a stage is being set up, before any element
    is pulled.
    """


class NotCallableError(ConfigurationError, TypeError):
    pass


class NotIterableError(ConfigurationError, TypeError):
    pass


class InvalidArgumentError(ConfigurationError, ValueError):
    pass


class RangeStepError(ConfigurationError, ValueError):
    pass


class StreamConsumedError(StreamError, RuntimeError):
    """
    A stream was used after its ownership moved to another stream,
    or a stage was added after pulling had started.
    """
