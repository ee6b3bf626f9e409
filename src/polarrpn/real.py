'''
Real number primitives.

The calculator never does numeric work on its own; everything goes through a
RealOps backend. Two are provided: plain floats, and mpmath at the fixed
precision of the handheld the calculator was first written for.
'''

from collections import namedtuple
from decimal import Decimal, Context, ROUND_HALF_UP
import math

import mpmath

from .util import (RealError, InvalidNumber, DivideByZero, LogOfZero,
                   wrap_real_errors)


NORMAL = 'normal'
SCI = 'sci'
ENG = 'eng'

# Smallest exponent still shown without an E in NORMAL mode, e.g. .001
NORMAL_EXPONENT = -3

RealFormat = namedtuple('RealFormat', 'max_length mode digits significant')
RealFormat.__new__.__defaults__ = (-1, NORMAL, -1, 10)
RealFormat.__doc__ = '''
String conversion settings.

:param max_length: Longest allowed text, negative for unbounded.
:param mode: NORMAL, SCI or ENG.
:param digits: Fixed number of decimals, negative for floating.
:param significant: Significant digits shown when floating.
'''


def _round(number, places):
    return Context(prec=places, rounding=ROUND_HALF_UP).plus(number)


def _plain(number):
    return format(number.normalize(), 'f')


def _fixed(number, digits):
    return format(number.quantize(Decimal(1).scaleb(-digits),
                                  rounding=ROUND_HALF_UP),
                  'f')


def _format(number, mode, digits, significant):
    if number.is_zero():
        if digits < 0:
            return '0'
        # Drop the sign of -0
        number = Decimal(0)
    if mode == NORMAL:
        rounded = _round(number, significant)
        if number.is_zero() or \
           NORMAL_EXPONENT <= rounded.adjusted() < significant:
            return _plain(rounded) if digits < 0 else _fixed(number, digits)
        mode = SCI
    rounded = _round(number, significant if digits < 0 else digits + 1)
    exponent = 0 if rounded.is_zero() else rounded.adjusted()
    if mode == ENG:
        exponent -= exponent % 3
    mantissa = rounded.scaleb(-exponent)
    text = _plain(mantissa) if digits < 0 else _fixed(mantissa, digits)
    return '{}E{}'.format(text, exponent)


def format_decimal(number, fmt):
    '''
    Format a Decimal according to a RealFormat.

    NORMAL output too long for fmt.max_length falls back to scientific,
    dropping significant digits until it fits.
    '''
    if not number.is_finite():
        return str(number).lower()
    text = _format(number, fmt.mode, fmt.digits, fmt.significant)
    if fmt.max_length < 0:
        return text
    significant = fmt.significant
    while len(text) > fmt.max_length and significant > 1:
        significant -= 1
        text = _format(number, SCI, -1, significant)
    return text


class RealOps:
    '''
    Real number primitive: arithmetic, trigonometry, logarithms and string
    conversion on some opaque number type.

    Subclasses provide `lib`, a namespace with math-module-alike functions,
    `number`, the constructor from int or str, and `to_decimal`.
    '''

    lib = None
    number = None

    def __init__(self):
        self.zero = self.from_int(0)

    def from_int(self, n):
        return self.number(n)

    @wrap_real_errors(InvalidNumber, 'Cannot convert {1!r}')
    def from_str(self, text):
        return self.number(text)

    def to_decimal(self, x):
        raise NotImplementedError

    def to_str(self, x, fmt=RealFormat()):
        return format_decimal(self.to_decimal(x), fmt)

    def compare(self, a, b):
        '''
        Return -1, 0 or 1 if a is less than, equal to or greater than b.
        '''
        return (a > b) - (a < b)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    @wrap_real_errors(RealError, 'Cannot multiply {1} by {2}')
    def mul(self, a, b):
        return a * b

    @wrap_real_errors(DivideByZero, 'Cannot divide {1} by {2}')
    def div(self, a, b):
        return a / b

    def neg(self, x):
        return -x

    @wrap_real_errors(RealError, 'Cannot take square root of {1}')
    def sqrt(self, x):
        if self.compare(x, self.zero) < 0:
            raise RealError('Cannot take square root of {}'.format(x))
        return self.lib.sqrt(x)

    def sin(self, x):
        return self.lib.sin(x)

    def cos(self, x):
        return self.lib.cos(x)

    def atan(self, x):
        return self.lib.atan(x)

    @wrap_real_errors(RealError, 'Cannot reduce {1} modulo {2}')
    def fmod(self, a, b):
        '''
        Remainder of a / b, less than b away from zero.
        '''
        return self.lib.fmod(a, b)

    @wrap_real_errors(RealError, 'Cannot take logarithm of {1}')
    def log(self, x):
        sign = self.compare(x, self.zero)
        if sign == 0:
            raise LogOfZero('Cannot take logarithm of zero')
        elif sign < 0:
            raise RealError('Cannot take logarithm of {}'.format(x))
        return self.lib.log(x)

    @wrap_real_errors(RealError, 'Cannot exponentiate {1}')
    def exp(self, x):
        return self.lib.exp(x)

    def radians(self, x):
        return self.lib.radians(x)

    def degrees(self, x):
        return self.lib.degrees(x)


class FloatReal(RealOps):
    '''
    Python floats.
    '''

    lib = math
    number = float

    def to_decimal(self, x):
        return Decimal(repr(x))


class MpReal(RealOps):
    '''
    mpmath numbers at a fixed precision, in a context of their own.
    '''

    # What the TI-84 family keeps internally
    DPS = 14

    def __init__(self):
        self.lib = mpmath.MPContext()
        self.lib.dps = type(self).DPS
        self.number = self.lib.mpf
        super().__init__()

    def to_decimal(self, x):
        return Decimal(self.lib.nstr(x, self.lib.dps))


BACKENDS = {
    'float': FloatReal,
    'mp': MpReal,
}
