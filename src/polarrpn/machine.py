import logging

from . import keys
from .session import Session


log = logging.getLogger(__name__)


class Machine:
    '''
    Polar RPN stack machine.

    Takes keys one at a time and runs each to completion. Holds no state of
    its own beyond its collaborators; the Session has it all.
    '''

    # First line below the stack, echoing the input.
    INPUT_LINE = Session.STACK_SIZE

    def __init__(self, arithmetic, codec, screen, session=None):
        '''
        :param arithmetic: Arithmetic to run operators with.
        :param codec: Codec to parse input and format the stack with.
        :param screen: Anything with a width and write(line, text).
        :param session: Session to work on, fresh one if None.
        '''
        self.arithmetic = arithmetic
        self.codec = codec
        self.screen = screen
        self.session = Session() if session is None else session
        self.actions = dict(type(self).ACTIONS)
        if not arithmetic.extended:
            # No way to see rectangular on the basic calculator
            del self.actions[keys.MODE]

    def press(self, key):
        '''
        Handle one key. Return False once the session should end.

        Unknown keys are ignored. Numeric errors propagate, with stack and
        input left as they were before the key.
        '''
        if key == keys.QUIT:
            return False
        elif key in keys.CHARS:
            self.session.input.append(keys.CHARS[key])
            self.printinput()
        elif key in self.actions:
            self.actions[key](self)
            self.render()
        elif key in keys.OPERATORS:
            self.binary(keys.OPERATORS[key])
            self.render()
        else:
            log.debug('Ignoring key %r', key)
        return True

    def enter(self):
        '''
        Parse input and push it, unless the stack is full.
        '''
        stack = self.session.stack
        if stack.isfull():
            log.debug('Stack full, not entering %r', str(self.session.input))
            return
        stack.push(self.codec.parse(str(self.session.input)))
        self.session.input.clear()

    def delete(self):
        '''
        Clear input.
        '''
        self.session.input.clear()

    def clear(self):
        '''
        Clear stack and input.
        '''
        self.session.stack.clear()
        self.delete()

    def togglemode(self):
        '''
        Switch between polar and rectangular display.
        '''
        self.session.rectangular = not self.session.rectangular

    def binary(self, name):
        '''
        Replace the top two values with the named operator applied to them,
        deeper value on the left.
        '''
        operator = self.arithmetic.operator(name)
        if operator is None:
            log.debug('Operator %r not available', name)
        elif not self.session.stack.combine(operator):
            log.debug('Less than 2 elements on stack for %r', name)

    def printline(self, text, line):
        '''
        Blank the whole line, then write text on it.
        '''
        self.screen.write(line, ' ' * self.screen.width)
        self.screen.write(line, text)

    def printinput(self):
        self.printline(str(self.session.input) or self.codec.BLANK,
                       type(self).INPUT_LINE)

    def render(self):
        '''
        Redraw every stack line, blank past the top of the stack, and input.
        '''
        stack = self.session.stack
        for line in range(stack.capacity):
            if line < len(stack):
                text = self.codec.format(stack[line],
                                         rectangular=self.session.rectangular)
            else:
                text = ''
            self.printline(text, line)
        self.printinput()

    ACTIONS = {
        keys.ENTER: enter,
        keys.CLEAR: clear,
        keys.DEL: delete,
        keys.MODE: togglemode,
    }
