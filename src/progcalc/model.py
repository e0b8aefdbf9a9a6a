from .evaluator import Evaluator
from .lexer import parse_literal
from .numeric import Base, BitWidth, SignMode, sign_extend
from .util import CalcError


def _group(text, every=4, sep=' '):
    '''
    Insert sep every so many characters, counting from the right.
    '''
    head = len(text) % every
    groups = [text[:head]] if head else []
    groups.extend(text[i:i + every] for i in range(head, len(text), every))
    return sep.join(groups)


class Calculator:
    '''
    Programmer's calculator: one accumulator, one pending binary operator
    and a one slot memory, all confined to the active bit width.

    Every command mutates the calculator in place. None of them raise on bad
    input, except toggle_bit on an index outside the width; typos just leave
    the value alone.
    '''

    DEFAULT_BASE = Base.HEX
    DEFAULT_BIT_WIDTH = BitWidth.SIXTY_FOUR
    DEFAULT_SIGN_MODE = SignMode.SIGNED

    def __init__(self, base=None, bit_width=None, sign_mode=None):
        self.current_value = 0
        # Left operand, captured when an operator is chosen.
        self.stored_value = 0
        self.pending_operation = None
        # Digits typed since the last clear, operator or equals.
        self.input_buffer = ''
        self.memory = 0
        self.has_memory = False
        self._base = base or type(self).DEFAULT_BASE
        self._bit_width = bit_width or type(self).DEFAULT_BIT_WIDTH
        self.sign_mode = sign_mode or type(self).DEFAULT_SIGN_MODE
        self.evaluator = Evaluator()

    @property
    def base(self):
        return self._base

    @base.setter
    def base(self, base):
        '''
        Switch base. Typing restarts; the value is kept.
        '''
        self._base = base
        self.input_buffer = ''

    @property
    def bit_width(self):
        return self._bit_width

    @bit_width.setter
    def bit_width(self, bit_width):
        '''
        Switch width, dropping (not sign extending) bits above it.
        '''
        self._bit_width = bit_width
        self.current_value &= bit_width.mask
        self.stored_value &= bit_width.mask

    @property
    def mask(self):
        return self.bit_width.mask

    @property
    def display_value(self):
        return self.current_value & self.mask

    @property
    def signed_value(self):
        '''
        Display value read as a two's complement number of the active width.
        '''
        return sign_extend(self.display_value, self.bit_width)

    @property
    def has_pending_operation(self):
        return self.pending_operation is not None

    @property
    def pending_symbol(self):
        if self.pending_operation is None:
            return ''
        return self.pending_operation.value

    def _reparse(self):
        value = parse_literal(self.input_buffer, self.base.radix)
        if value is None:
            return False
        self.current_value = value & self.mask
        return True

    def input_digit(self, digit):
        '''
        Type a digit.

        Returns False if the buffer no longer parses in the active base, in
        which case the digit stays in the buffer but the value doesn't change.
        '''
        self.input_buffer += digit
        return self._reparse()

    def backspace(self):
        '''
        Remove the last typed digit. Returns False if what's left won't parse.
        '''
        if not self.input_buffer:
            return True
        self.input_buffer = self.input_buffer[:-1]
        if not self.input_buffer:
            self.current_value = 0
            return True
        return self._reparse()

    def parse_input(self, text):
        '''
        Replace the value with free text: an expression, or a single literal.

        Empty text means 0. Returns False, keeping the value, if text doesn't
        evaluate.
        '''
        cleaned = text.strip().lower()
        if not cleaned:
            self.current_value = 0
            self.input_buffer = ''
            return True
        value = self.evaluator.evaluate(cleaned, self.base.radix)
        if value is None:
            return False
        self.current_value = value & self.mask
        self.input_buffer = ''
        return True

    def clear(self):
        self.current_value = 0
        self.input_buffer = ''

    def clear_all(self):
        self.clear()
        self.stored_value = 0
        self.pending_operation = None

    def set_operation(self, operation):
        '''
        Choose the next binary operator, first applying any pending one.
        '''
        if self.pending_operation is not None:
            self.evaluate()
        self.stored_value = self.current_value
        self.pending_operation = operation
        self.input_buffer = ''

    def evaluate(self):
        '''
        Apply the pending operator, if any.
        '''
        if self.pending_operation is None:
            return
        self.current_value = self.pending_operation.apply(self.stored_value,
                                                          self.current_value,
                                                          self.bit_width)
        self.pending_operation = None
        self.stored_value = 0
        self.input_buffer = ''

    def toggle_sign(self):
        self.current_value = (~self.current_value + 1) & self.mask
        self.input_buffer = ''

    def bitwise_not(self):
        self.current_value = ~self.current_value & self.mask
        self.input_buffer = ''

    def toggle_bit(self, index):
        '''
        Flip bit index, counting from 0 at the least significant bit.

        :raises CalcError: index is outside the active width.
        '''
        if not 0 <= index < self.bit_width.value:
            raise CalcError('Bit {} out of range for {}'.format(
                index, self.bit_width.label))
        self.current_value ^= 1 << index
        self.input_buffer = ''

    def memory_clear(self):
        self.memory = 0
        self.has_memory = False

    def memory_recall(self):
        self.current_value = self.memory & self.mask
        self.input_buffer = ''

    def memory_add(self):
        self.memory = (self.memory + self.current_value) & self.mask
        self.has_memory = True

    def memory_store(self):
        self.memory = self.current_value
        self.has_memory = True

    def formatted(self, value=None, base=None):
        '''
        Render value (default: the display value) in base (default: active).

        Hex is upper case. Only decimal in signed mode is ever negative.
        '''
        if value is None:
            value = self.current_value
        base = base or self.base
        masked = value & self.mask
        if base is Base.DEC and self.sign_mode is SignMode.SIGNED:
            return str(sign_extend(masked, self.bit_width))
        return format(masked, base.spec)

    def formatted_grouped(self, base=None):
        '''
        Like formatted, with hex and binary split into groups of 4 digits.
        '''
        base = base or self.base
        raw = self.formatted(base=base)
        if base is Base.BIN:
            raw = raw.zfill(-(-len(raw) // 4) * 4)
        elif base is not Base.HEX:
            return raw
        return _group(raw)

    def prefixed(self, base=None):
        '''
        Formatted value with its base prefix, fit for pasting elsewhere.
        '''
        base = base or self.base
        return base.prefix + self.formatted(base=base)

    def is_digit_enabled(self, digit):
        '''
        Return True if digit can be typed in the active base.
        '''
        if len(digit) != 1:
            return False
        value = parse_literal(digit, 16)
        return value is not None and value < self.base.radix
