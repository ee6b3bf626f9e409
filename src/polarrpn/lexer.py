from functools import reduce
import operator

import regex

from . import keys
from .codec import Codec
from .util import PolarRPNError


class Lexer:
    '''
    Lexer turning typed lines into keypad keys.

    Characters type into the input line; whitespace after them is Enter, as
    is the end of a line still being typed. Holds no internal state between
    lines.
    '''

    # Typed character to key
    CHARS = {
        **{digit: digit for digit in '0123456789'},
        '.': 'decpnt',
        Codec.COMPONENT_SEPARATOR: 'comma',
        Codec.ANGLE_SEPARATOR: 'angle',
        # ASCII stand-in for ∠
        '@': 'angle',
        Codec.NEGATIVE: 'chs',
        # ASCII stand-in for ⁻; plain - is subtraction
        '~': 'chs',
    }
    # Typed character to any other key
    COMMANDS = {
        '+': 'add',
        '-': 'sub',
        '*': 'mul',
        '/': 'div',
        '^': 'pow',
        '&': 'angle-insert',
        'm': keys.MODE,
        'c': keys.CLEAR,
        'd': keys.DEL,
        'q': keys.QUIT,
    }

    assert set(CHARS.values()) <= set(keys.CHARS)

    CHAR = r'(?:' + r'|'.join(map(regex.escape, CHARS)) + r')'
    COMMAND = r'(?:' + r'|'.join(map(regex.escape, COMMANDS)) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<char>' + CHAR + r')|' \
             r'(?<command>' + COMMAND + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and yield its keys.

        Raises on the first thing it can't lex, after yielding everything
        before it.
        '''
        typing = False
        for match in self.matches(line):
            kind = match.lastgroup
            if kind == 'char':
                typing = True
                yield type(self).CHARS[match.group()]
            elif kind == 'space':
                if typing:
                    typing = False
                    yield keys.ENTER
            else:
                typing = False
                yield type(self).COMMANDS[match.group()]
        if typing:
            yield keys.ENTER

    def matches(self, line):
        '''
        Yield lexeme matches.
        '''
        pos = 0
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        while pos < len(line):
            match = pattern.match(line, pos)
            if match is None:
                raise PolarRPNError("Couldn't lex {0}".format(
                    line[pos:].strip()))
            yield match
            pos = match.end()
