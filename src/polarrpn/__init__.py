'''
Polar complex RPN calculator.

Keeps complex numbers as magnitude∠angle, so multiplication and division are
cheap and exact, and converts to rectangular only to add, subtract and
exponentiate. Nine-level stack, like the handheld it was written for.

Keys (see lexer for typing them):

- 0-9 . , ∠ ⁻ type into the input line; 3,4 is rectangular, 5∠90 polar.
- enter pushes the input; clear empties everything; del the input.
- + - * / ^ operate on the top two values; & takes the first's magnitude and
  the second's as an angle.
- mode switches between polar and a+bi display.
'''

from .arithmetic import Arithmetic
from .cli import CLI
from .codec import Codec
from .lexer import Lexer
from .machine import Machine
from .real import FloatReal, MpReal, RealFormat
from .screen import Screen
from .session import Session
from .values import PolarValue, ComplexValue


__all__ = ('Arithmetic', 'CLI', 'Codec', 'Lexer', 'Machine', 'FloatReal',
           'MpReal', 'RealFormat', 'Screen', 'Session', 'PolarValue',
           'ComplexValue')
