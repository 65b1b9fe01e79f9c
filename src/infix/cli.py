from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .calculator import Calculator
from .lexer import Lexer
from .util import InfixError, EngineError


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = 'calc> '
    HISTORY_FILE = '~/.infix_history'

    def _lines(self):
        '''
        Yield trimmed, non-blank input lines.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def _report(self, message):
        print(message, file=sys.stderr)
        if self.args.verbose:
            traceback.print_exc(file=sys.stderr)

    def dumper(self):
        '''
        Dump all lexemes of each line, then the tree it reduces to.
        '''
        calculator = Calculator()
        lexer = calculator.lexer
        print('[kind]\t<repr(lexeme)>')
        for line in self._lines():
            try:
                for match in lexer.lex(line):
                    kind = lexer.kind(match)
                    if kind is not None:
                        print(kind.name, repr(match.group(0)), sep='\t')
                tree = list(calculator.parse(line).render())
            except InfixError as e:
                self._report(e.args[0])
                continue
            print(*tree, sep='\n')

    def executor(self):
        '''
        Evaluate each line, printing the result or why there is none.
        '''
        calculator = Calculator()
        for line in self._lines():
            try:
                result = calculator.evaluate(line)
            # One bad line never ends the session.
            except InfixError as e:
                self._report(e.args[0])
            except EngineError as e:
                self._report('Internal error: {}'.format(e.args[0]))
            else:
                print(result)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Otherwise plain stdin.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator over 64-bit integers')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks on errors')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process arguments.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
