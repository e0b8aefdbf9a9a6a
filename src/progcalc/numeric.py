'''
Numeric model: bases, bit widths, sign modes and the binary operators.

All values are plain non-negative ints; the active bit width's mask is what
keeps them in range.
'''

from enum import Enum
import operator

from .util import UINT64_MAX


class Base(Enum):
    HEX = 'HEX'
    DEC = 'DEC'
    OCT = 'OCT'
    BIN = 'BIN'

    @property
    def radix(self):
        return _RADICES[self]

    @property
    def prefix(self):
        return _PREFIXES[self]

    @property
    def spec(self):
        '''
        format() spec rendering an unsigned value in this base.
        '''
        return _SPECS[self]


_RADICES = {Base.BIN: 2, Base.OCT: 8, Base.DEC: 10, Base.HEX: 16}
_PREFIXES = {Base.BIN: '0b', Base.OCT: '0o', Base.DEC: '', Base.HEX: '0x'}
_SPECS = {Base.BIN: 'b', Base.OCT: 'o', Base.DEC: 'd', Base.HEX: 'X'}


class BitWidth(Enum):
    EIGHT = 8
    SIXTEEN = 16
    THIRTY_TWO = 32
    SIXTY_FOUR = 64

    @property
    def label(self):
        return '{} bit'.format(self.value)

    @property
    def mask(self):
        if self.value == 64:
            return UINT64_MAX
        return (1 << self.value) - 1

    @property
    def sign_bit(self):
        return 1 << (self.value - 1)


class SignMode(Enum):
    SIGNED = 'Signed'
    UNSIGNED = 'Unsigned'


def sign_extend(value, width):
    '''
    Interpret value, already masked to width, as two's complement.
    '''
    if value & width.sign_bit:
        return value - (1 << width.value)
    return value


def _divide(left, right):
    return 0 if right == 0 else left // right


def _mod(left, right):
    return 0 if right == 0 else left % right


def _shift_left(left, right, width):
    return left << (right % width)


def _shift_right(left, right, width):
    return left >> (right % width)


def _rotate_left(left, right, width):
    shift = right % width
    left &= (1 << width) - 1
    return (left << shift) | (left >> (width - shift))


def _rotate_right(left, right, width):
    shift = right % width
    left &= (1 << width) - 1
    return (left >> shift) | (left << (width - shift))


class Operation(Enum):
    '''
    Binary operators. Values are the symbols shown while one is pending.
    '''
    ADD = '+'
    SUBTRACT = '\N{MINUS SIGN}'
    MULTIPLY = '\N{MULTIPLICATION SIGN}'
    DIVIDE = '\N{DIVISION SIGN}'
    MOD = '%'
    AND = 'AND'
    OR = 'OR'
    XOR = 'XOR'
    NAND = 'NAND'
    NOR = 'NOR'
    XNOR = 'XNOR'
    SHIFT_LEFT = '<<'
    SHIFT_RIGHT = '>>'
    ROTATE_LEFT = 'ROL'
    ROTATE_RIGHT = 'ROR'

    def apply(self, left, right, width):
        '''
        Apply to left and right, wrapping the result into width.

        Division and modulo by zero give 0. Shift and rotate amounts are
        taken modulo the width.
        '''
        if self in _SHIFTS:
            result = _SHIFTS[self](left, right, width.value)
        else:
            result = _ARITHMETIC[self](left, right)
        return result & width.mask


# Python ints don't wrap, but masking afterwards is the same as wrapping
# modulo 2**64 and then masking.
_ARITHMETIC = {
    Operation.ADD: operator.__add__,
    Operation.SUBTRACT: operator.__sub__,
    Operation.MULTIPLY: operator.__mul__,
    Operation.DIVIDE: _divide,
    Operation.MOD: _mod,
    Operation.AND: operator.__and__,
    Operation.OR: operator.__or__,
    Operation.XOR: operator.__xor__,
    Operation.NAND: lambda left, right: ~(left & right),
    Operation.NOR: lambda left, right: ~(left | right),
    Operation.XNOR: lambda left, right: ~(left ^ right),
}

_SHIFTS = {
    Operation.SHIFT_LEFT: _shift_left,
    Operation.SHIFT_RIGHT: _shift_right,
    Operation.ROTATE_LEFT: _rotate_left,
    Operation.ROTATE_RIGHT: _rotate_right,
}
