import regex

from .real import RealFormat
from .values import PolarValue, ComplexValue


class Codec:
    '''
    Text <-> polar value.

    Accepts three token forms:

    - 5       plain number, angle 0
    - 5∠90    magnitude and angle in degrees
    - 3,4     real and imaginary parts

    Whichever separator comes first splits the token.
    '''

    ANGLE_SEPARATOR = '\N{ANGLE}'
    COMPONENT_SEPARATOR = ','
    # The keypad's negative sign, distinct from minus
    NEGATIVE = '\N{SUPERSCRIPT MINUS}'
    # What an empty input line shows, and means
    BLANK = '0'

    def __init__(self, polar, fmt=None):
        '''
        :param polar: Polar (or Arithmetic) over the RealOps to use.
        :param fmt: RealFormat for output.
        '''
        self.polar = polar
        self.ops = polar.ops
        self.fmt = RealFormat() if fmt is None else fmt
        self.token = regex.compile(
            r'(?<first>[^{separators}]*)'
            r'(?:(?<separator>[{separators}])(?<second>.*))?'.format(
                separators=regex.escape(type(self).ANGLE_SEPARATOR +
                                        type(self).COMPONENT_SEPARATOR)),
            flags=regex.DOTALL | regex.VERSION1)

    def _real(self, text):
        return self.ops.from_str(text.replace(type(self).NEGATIVE, '-'))

    def parse(self, text):
        '''
        Parse token into a normalized polar value.

        InvalidNumber on malformed numbers.
        '''
        match = self.token.fullmatch(text or type(self).BLANK)
        first = self._real(match.group('first'))
        separator = match.group('separator')
        if separator is None:
            return self.polar.normalize(PolarValue(first, self.polar.zero))
        second = self._real(match.group('second'))
        if separator == type(self).ANGLE_SEPARATOR:
            return self.polar.normalize(PolarValue(first, second))
        return self.polar.to_polar(ComplexValue(first, second))

    def format(self, value, rectangular=False):
        '''
        Format value as magnitude∠angle, or as a+bi if rectangular.
        '''
        ops = self.ops
        if not rectangular:
            return ''.join([ops.to_str(value.magnitude, self.fmt),
                            type(self).ANGLE_SEPARATOR,
                            ops.to_str(value.angle, self.fmt)])
        real, imag = self.polar.to_rectangular(value)
        sign = '+'
        if ops.compare(imag, self.polar.zero) < 0:
            imag = ops.neg(imag)
            sign = '-'
        return ''.join([ops.to_str(real, self.fmt),
                        sign,
                        ops.to_str(imag, self.fmt),
                        'i'])
