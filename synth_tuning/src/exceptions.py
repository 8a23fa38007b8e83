import functools
from abc import ABCMeta


class NonPositiveModulusError(ValueError):
    """
    Raised by the floor-style modulus helpers when the divisor is zero, negative or NaN
    """
    pass


# TUNING
class TuningException(Exception, metaclass=ABCMeta):
    pass


class InvalidTuningParameters(TuningException):
    pass


def raises(*e):
    """
    A decorator that determines that a function may raise a specific exception
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)
        return wrapper
    return decorator
