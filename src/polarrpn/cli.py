from os import isatty
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import PolarRPNError
from .real import BACKENDS, RealFormat, NORMAL, SCI, ENG
from .arithmetic import Arithmetic
from .codec import Codec
from .screen import Screen
from .session import Session
from .machine import Machine
from .lexer import Lexer


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # No persistence between runs
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the polar RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_BACKEND = 'mp'

    def _machine(self):
        ops = BACKENDS[self.args.backend]()
        arithmetic = Arithmetic(ops, extended=not self.args.basic)
        codec = Codec(arithmetic, RealFormat(max_length=self.args.max_length,
                                             mode=self.args.mode,
                                             digits=self.args.digits))
        return Machine(arithmetic, codec, Screen(),
                       Session(rectangular=self.args.rectangular))

    def dumper(self):
        '''
        Dump the keys each line lexes to.
        '''
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                print(*lexer.lex(line))
            except PolarRPNError as e:
                print(e.args[0], file=sys.stderr)

    def executor(self):
        '''
        Run machine, printing the stack after every line.
        '''
        machine = self._machine()
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for key in lexer.lex(line):
                    if not machine.press(key):
                        return
            # Abort entire rest of line, and whatever was being typed
            except PolarRPNError as e:
                log.debug('Line %r failed', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
                machine.delete()
                machine.printinput()
            self.printstack(machine)

    def printstack(self, machine):
        '''
        Print the non-blank stack lines, bottom of the stack first.
        '''
        lines = machine.screen.dump()[:machine.INPUT_LINE]
        for line in lines:
            if line:
                print(line)
        stdout.flush()

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Polar complex RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-r', '--rectangular',
                                          action='store_true',
                                          help='start showing a+bi')
        self.argument_parser.add_argument('-b', '--backend',
                                          choices=sorted(BACKENDS),
                                          default=self.DEFAULT_BACKEND)
        self.argument_parser.add_argument('--basic',
                                          action='store_true',
                                          help='no ^, & or display modes')
        self.argument_parser.add_argument('-k', '--digits',
                                          type=int,
                                          choices=range(-1, 10),
                                          default=RealFormat().digits,
                                          help='fixed decimals, -1 floats')
        self.argument_parser.add_argument('-l', '--max-length',
                                          type=int,
                                          default=RealFormat().max_length)
        mode_groups = self.argument_parser.add_mutually_exclusive_group()
        for long_, mode in [('--sci', SCI), ('--eng', ENG)]:
            mode_groups.add_argument(long_,
                                     action='store_const',
                                     const=mode,
                                     dest='mode')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        main_groups.add_argument('-D', '--dump',
                                 action='store_const',
                                 const=self.dumper,
                                 dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin,
                                          mode=NORMAL)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
