from .values import PolarValue, ComplexValue


class Polar:
    '''
    Angle normalization and polar <-> rectangular conversion over a RealOps
    backend.

    :param ops: RealOps backend doing the actual number crunching.
    :param exact_zero: Return an exact zero magnitude for the origin instead
                       of asking the backend for sqrt(0).
    '''

    def __init__(self, ops, exact_zero=True):
        self.ops = ops
        self.exact_zero = exact_zero
        self.zero = ops.from_int(0)
        self.one = ops.from_int(1)
        self.r90 = ops.from_int(90)
        self.r180 = ops.from_int(180)
        self.r360 = ops.from_int(360)
        self.rn90 = ops.from_int(-90)
        self.rn180 = ops.from_int(-180)
        self.rn360 = ops.from_int(-360)

    def normalize(self, value):
        '''
        Return value with non-negative magnitude and angle in (-180, 180].
        '''
        ops = self.ops
        magnitude, angle = value
        # Negative magnitude is the same point half a turn around.
        if ops.compare(magnitude, self.zero) < 0:
            magnitude = ops.neg(magnitude)
            angle = ops.add(angle, self.r180)
        # Down to within a turn, so the loops step at most once
        if ops.compare(angle, self.r360) >= 0 or \
           ops.compare(angle, self.rn360) <= 0:
            angle = ops.fmod(angle, self.r360)
        while ops.compare(angle, self.r180) > 0:
            angle = ops.sub(angle, self.r360)
        while ops.compare(angle, self.rn180) <= 0:
            angle = ops.add(angle, self.r360)
        return PolarValue(magnitude, angle)

    def to_rectangular(self, value):
        ops = self.ops
        radians = ops.radians(value.angle)
        return ComplexValue(ops.mul(value.magnitude, ops.cos(radians)),
                            ops.mul(value.magnitude, ops.sin(radians)))

    def to_polar(self, value):
        '''
        Convert rectangular to normalized polar.

        Quadrant correction is done by hand; there is only a one argument
        arctangent to work with.
        '''
        ops = self.ops
        real, imag = value
        squares = ops.add(ops.mul(real, real), ops.mul(imag, imag))
        if self.exact_zero and ops.compare(squares, self.zero) == 0:
            magnitude = self.zero
        else:
            magnitude = ops.sqrt(squares)

        if ops.compare(real, self.zero) == 0:
            angle = {
                -1: self.rn90,
                0: self.zero,
                1: self.r90,
            }[ops.compare(imag, self.zero)]
        else:
            angle = ops.degrees(ops.atan(ops.div(imag, real)))
            if ops.compare(real, self.zero) < 0:
                angle = ops.add(angle, self.r180)

        return self.normalize(PolarValue(magnitude, angle))
