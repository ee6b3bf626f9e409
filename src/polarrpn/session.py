from .util import InputOverflow


class Stack:
    '''
    Fixed capacity value stack. Index 0 is the bottom, and the first display
    line.
    '''

    def __init__(self, capacity):
        self.capacity = capacity
        self.values = []

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def isfull(self):
        return len(self.values) >= self.capacity

    def push(self, value):
        '''
        Push value. Return False, leaving the stack alone, if full.
        '''
        if self.isfull():
            return False
        self.values.append(value)
        return True

    def combine(self, f):
        '''
        Replace the top two values with f(deeper, top).

        Return False, leaving the stack alone, if there are fewer than two.
        Also left alone if f raises.
        '''
        if len(self.values) < 2:
            return False
        self.values[-2:] = [f(*self.values[-2:])]
        return True

    def clear(self):
        self.values.clear()


class InputBuffer:
    '''
    The token being keyed in. Rejects characters past its capacity.
    '''

    def __init__(self, capacity):
        self.capacity = capacity
        self.chars = []

    def __str__(self):
        return ''.join(self.chars)

    def __len__(self):
        return len(self.chars)

    def append(self, char):
        if len(self.chars) >= self.capacity:
            raise InputOverflow('Input longer than {} characters'.format(
                self.capacity))
        self.chars.append(char)

    def clear(self):
        self.chars.clear()


class Session:
    '''
    Everything a calculator run remembers: stack, input and display mode.
    '''

    STACK_SIZE = 9
    INPUT_SIZE = 100

    def __init__(self, rectangular=False):
        self.stack = Stack(type(self).STACK_SIZE)
        self.input = InputBuffer(type(self).INPUT_SIZE)
        self.rectangular = rectangular
