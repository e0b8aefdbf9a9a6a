from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession

from .util import CalcError, wrap_user_errors, store_selection, load_selection
from .numeric import Base, BitWidth, Operation, SignMode
from .model import Calculator


# Operator words, as typed, to operators.
OPERATORS = {
    '+': Operation.ADD,
    '-': Operation.SUBTRACT,
    '*': Operation.MULTIPLY,
    '/': Operation.DIVIDE,
    '%': Operation.MOD,
    '&': Operation.AND,
    '|': Operation.OR,
    '^': Operation.XOR,
    '<<': Operation.SHIFT_LEFT,
    '>>': Operation.SHIFT_RIGHT,
    'and': Operation.AND,
    'or': Operation.OR,
    'xor': Operation.XOR,
    'nand': Operation.NAND,
    'nor': Operation.NOR,
    'xnor': Operation.XNOR,
    'rol': Operation.ROTATE_LEFT,
    'ror': Operation.ROTATE_RIGHT,
}


@wrap_user_errors('No such base {0!r}')
def _base(name):
    return Base[name.upper()]


@wrap_user_errors('No such width {0!r}')
def _bit_width(bits):
    return BitWidth(int(bits))


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class Commands:
    '''
    Words understood by the command line, bound to one calculator.

    Anything that's neither a command nor an operator is typed in as a value
    or expression. Commands win, so hex values spelling one (dec) need 0x.
    '''

    def __init__(self, calculator, out=None):
        self.calculator = calculator
        self.out = out
        # Commands taking no argument.
        self.nullary = {
            '=': calculator.evaluate,
            'clear': calculator.clear,
            'allclear': calculator.clear_all,
            'bs': calculator.backspace,
            'neg': calculator.toggle_sign,
            'not': calculator.bitwise_not,
            'mc': calculator.memory_clear,
            'mr': calculator.memory_recall,
            'm+': calculator.memory_add,
            'ms': calculator.memory_store,
            'signed': lambda: self.sign_mode(SignMode.SIGNED),
            'unsigned': lambda: self.sign_mode(SignMode.UNSIGNED),
            'show': self.show,
            'copy': self.copy,
            'paste': self.paste,
            'help': self.help,
        }
        for base in Base:
            self.nullary[base.name.lower()] = self._setter('base', base)
        for width in BitWidth:
            self.nullary['w{}'.format(width.value)] = \
                self._setter('bit_width', width)
        # Commands taking the next word as argument.
        self.unary = {
            'bit': self.toggle_bit,
            'key': self.key,
            'base': lambda name: self._setter('base', _base(name))(),
            'width': lambda bits: self._setter('bit_width',
                                               _bit_width(bits))(),
        }

    def _setter(self, attribute, value):
        def setter():
            setattr(self.calculator, attribute, value)
        return setter

    def feed(self, line):
        '''
        Run every word on the line, left to right.

        :raises CalcError: on a bad word. The rest of the line is dropped.
        '''
        words = iter(line.split())
        for word in words:
            lowered = word.lower()
            if lowered in self.nullary:
                self.nullary[lowered]()
            elif lowered in self.unary:
                argument = next(words, None)
                if argument is None:
                    raise CalcError('{} needs an argument'.format(word))
                self.unary[lowered](argument)
            elif lowered in OPERATORS:
                self.calculator.set_operation(OPERATORS[lowered])
            elif not self.calculator.parse_input(word):
                raise CalcError('Cannot parse {!r} as {}'.format(
                    word, self.calculator.base.value))

    def display(self):
        '''
        Return the display line: value, then pending operator and memory.
        '''
        calculator = self.calculator
        fields = [calculator.base.prefix +
                  calculator.formatted_grouped()]
        if calculator.has_pending_operation:
            fields.append(calculator.pending_symbol)
        if calculator.has_memory:
            fields.append('M')
        return '  '.join(fields)

    def sign_mode(self, sign_mode):
        self.calculator.sign_mode = sign_mode

    def key(self, digits):
        '''
        Type digits one at a time, as if on the keypad. bs takes them back.

        :raises CalcError: once the typed digits stop parsing in the active
                           base. They stay typed; the value doesn't change.
        '''
        for digit in digits:
            if not self.calculator.input_digit(digit):
                raise CalcError('{!r} is not valid {}'.format(
                    self.calculator.input_buffer,
                    self.calculator.base.value))

    @wrap_user_errors('Bad bit {1!r}')
    def toggle_bit(self, index):
        self.calculator.toggle_bit(int(index))

    def show(self):
        '''
        Print the value in every base.
        '''
        for base in Base:
            print(base.value, self.calculator.formatted_grouped(base),
                  file=self.out)
        print(self.calculator.bit_width.label,
              self.calculator.sign_mode.value,
              file=self.out)

    @wrap_user_errors('Cannot copy to clipboard')
    def copy(self):
        store_selection(self.calculator.prefixed())

    @wrap_user_errors('Cannot paste from clipboard')
    def paste(self):
        text = load_selection()
        if not self.calculator.parse_input(text):
            raise CalcError('Cannot parse {!r}'.format(text.strip()))

    def help(self):
        '''
        Print all possible words.
        '''
        print('commands:', *sorted(self.nullary), file=self.out)
        print('with argument:', *sorted(self.unary), file=self.out)
        print('operators:', *sorted(OPERATORS), file=self.out)


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def executor(self):
        '''
        Run calculator, printing the display after each line.
        '''
        calculator = Calculator(base=_base(self.args.base),
                                bit_width=_bit_width(self.args.width),
                                sign_mode=self.args.sign_mode)
        commands = Commands(calculator)
        for line in self.args.expressions:
            try:
                commands.feed(line)
            # Abort entire rest of line
            except CalcError as e:
                print(e.args[0], file=stderr)
                if self.args.verbose and e.__cause__ is not None:
                    traceback.print_exception(type(e.__cause__),
                                              e.__cause__,
                                              e.__cause__.__traceback__,
                                              file=stderr)
            print(commands.display())

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
            description="Programmer's calculator")
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-b', '--base',
                                          choices=[base.name.lower()
                                                   for base in Base],
                                          default='hex')
        self.argument_parser.add_argument('-w', '--width',
                                          type=int,
                                          choices=[width.value
                                                   for width in BitWidth],
                                          default=64)
        self.argument_parser.add_argument('-u', '--unsigned',
                                          action='store_const',
                                          const=SignMode.UNSIGNED,
                                          default=Calculator.DEFAULT_SIGN_MODE,
                                          dest='sign_mode')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
