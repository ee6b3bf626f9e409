'''
Abstract keypad keys.

Whatever reads the physical keypad (or the terminal, see lexer) hands these
to the machine.
'''

from .codec import Codec


# Keys that type a character into the input line, and the character.
CHARS = {
    **{digit: digit for digit in '0123456789'},
    'comma': Codec.COMPONENT_SEPARATOR,
    'decpnt': '.',
    'chs': Codec.NEGATIVE,
    'angle': Codec.ANGLE_SEPARATOR,
}

ENTER = 'enter'
CLEAR = 'clear'
DEL = 'del'
MODE = 'mode'
QUIT = 'quit'

# Keys that run a binary operator, and the operator's name.
OPERATORS = {
    'add': 'add',
    'sub': 'sub',
    'mul': 'mul',
    'div': 'div',
    'pow': 'pow',
    'angle-insert': 'angle',
}
