from .polar import Polar
from .values import PolarValue, ComplexValue


class Arithmetic(Polar):
    '''
    Binary operators over polar values. Every result comes out normalized.

    :param ops: RealOps backend.
    :param extended: Offer exponentiation and angle insertion, and keep the
                     origin's magnitude exact. The basic calculator has
                     neither.
    '''

    # Operator name to method name. Left operand first.
    BASIC = {
        'add': 'add',
        'sub': 'subtract',
        'mul': 'multiply',
        'div': 'divide',
    }
    EXTENDED = {
        'pow': 'power',
        'angle': 'insert_angle',
    }

    def __init__(self, ops, extended=True):
        super().__init__(ops, exact_zero=extended)
        self.extended = extended
        self.operators = dict(type(self).BASIC)
        if extended:
            self.operators.update(type(self).EXTENDED)

    def operator(self, name):
        '''
        Return bound binary operator by name, or None if not offered.
        '''
        method = self.operators.get(name)
        return None if method is None else getattr(self, method)

    def multiply(self, left, right):
        ops = self.ops
        return self.normalize(
            PolarValue(ops.mul(left.magnitude, right.magnitude),
                       ops.add(left.angle, right.angle)))

    def divide(self, left, right):
        '''
        Divide left by right. DivideByZero if right has zero magnitude.
        '''
        ops = self.ops
        return self.normalize(
            PolarValue(ops.div(left.magnitude, right.magnitude),
                       ops.sub(left.angle, right.angle)))

    def add(self, left, right):
        ops = self.ops
        left = self.to_rectangular(left)
        right = self.to_rectangular(right)
        return self.to_polar(ComplexValue(ops.add(left.real, right.real),
                                          ops.add(left.imag, right.imag)))

    def subtract(self, left, right):
        # Negative magnitude, fixed up by normalization
        negated = PolarValue(self.ops.neg(right.magnitude), right.angle)
        return self.add(left, negated)

    def power(self, left, right):
        '''
        Raise left to the complex power right, as exp(right * ln(left)).

        With left = r∠θ and right = c + di:

            left ^ right = e^(c ln r - d θ) ∠ (d ln r + c θ)

        LogOfZero if left has zero magnitude.
        '''
        ops = self.ops
        exponent = self.to_rectangular(right)
        log_magnitude = ops.log(left.magnitude)
        theta = ops.radians(left.angle)

        scale = ops.sub(ops.mul(exponent.real, log_magnitude),
                        ops.mul(exponent.imag, theta))
        rotation = ops.add(ops.mul(exponent.imag, log_magnitude),
                           ops.mul(exponent.real, theta))

        return self.multiply(PolarValue(ops.exp(scale), self.zero),
                             PolarValue(self.one, ops.degrees(rotation)))

    def insert_angle(self, magnitude, angle):
        '''
        Combine the magnitude of the first with the magnitude of the second,
        read as an angle in degrees.

        Lets an angle be keyed in like any plain number.
        '''
        return self.normalize(PolarValue(magnitude.magnitude,
                                         angle.magnitude))
