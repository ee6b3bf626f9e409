from functools import wraps


class PolarRPNError(Exception):
    pass


class RealError(PolarRPNError):
    '''
    Real number primitive refused an operation.
    '''


class InvalidNumber(RealError):
    pass


class DivideByZero(RealError):
    pass


class LogOfZero(RealError):
    pass


class InputOverflow(PolarRPNError):
    '''
    Input buffer full. The rejected character is not appended.
    '''


def wrap_real_errors(error, fmt):
    '''
    Decorator that converts backend exceptions to our own.

    Passes through PolarRPNErrors. The message is formatted with the wrapped
    function's arguments, self included.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PolarRPNError:
                raise
            except (ArithmeticError, ValueError, TypeError) as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
