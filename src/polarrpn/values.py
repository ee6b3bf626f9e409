from collections import namedtuple


PolarValue = namedtuple('PolarValue', 'magnitude angle')
PolarValue.__doc__ = '''
Complex number as magnitude and angle in degrees.

Normalized, magnitude is non-negative and -180 < angle <= 180.
'''

ComplexValue = namedtuple('ComplexValue', 'real imag')
ComplexValue.__doc__ = '''
Complex number as real and imaginary parts. Never stored on the stack.
'''
