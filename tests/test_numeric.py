'''
Operator and word size tests
'''

from pytest import mark

from progcalc.numeric import Base, BitWidth, Operation, sign_extend


WIDTHS = list(BitWidth)
VALUES = [0, 1, 0x7F, 0x80, 0xFF, 0x1234, 0x8000_0001, 0xDEAD_BEEF_CAFE_F00D,
          2 ** 64 - 1]


def test_masks():
    assert BitWidth.EIGHT.mask == 0xFF
    assert BitWidth.SIXTEEN.mask == 0xFFFF
    assert BitWidth.THIRTY_TWO.mask == 0xFFFF_FFFF
    assert BitWidth.SIXTY_FOUR.mask == 2 ** 64 - 1
    assert BitWidth.SIXTEEN.label == '16 bit'


def test_bases():
    assert [base.radix for base in Base] == [16, 10, 8, 2]
    assert [base.prefix for base in Base] == ['0x', '', '0o', '0b']


@mark.parametrize('width', WIDTHS)
@mark.parametrize('value', VALUES)
def test_masking_is_idempotent(width, value):
    assert (value & width.mask) & width.mask == value & width.mask


def test_wraparound():
    w8 = BitWidth.EIGHT
    assert Operation.ADD.apply(0xFF, 1, w8) == 0
    assert Operation.SUBTRACT.apply(0, 1, w8) == 0xFF
    assert Operation.MULTIPLY.apply(0x10, 0x10, w8) == 0
    assert Operation.SUBTRACT.apply(0, 1, BitWidth.SIXTY_FOUR) == 2 ** 64 - 1
    assert Operation.MULTIPLY.apply(2 ** 63, 2, BitWidth.SIXTY_FOUR) == 0


@mark.parametrize('value', VALUES)
def test_zero_division(value):
    for width in WIDTHS:
        assert Operation.DIVIDE.apply(value & width.mask, 0, width) == 0
        assert Operation.MOD.apply(value & width.mask, 0, width) == 0


def test_division_is_unsigned():
    w8 = BitWidth.EIGHT
    assert Operation.DIVIDE.apply(0xFF, 2, w8) == 0x7F
    assert Operation.MOD.apply(17, 5, w8) == 2


def test_bitwise():
    w8 = BitWidth.EIGHT
    assert Operation.AND.apply(0b1100, 0b1010, w8) == 0b1000
    assert Operation.OR.apply(0b1100, 0b1010, w8) == 0b1110
    assert Operation.XOR.apply(0b1100, 0b1010, w8) == 0b0110
    assert Operation.NAND.apply(0b1100, 0b1010, w8) == 0xF7
    assert Operation.NOR.apply(0b1100, 0b1010, w8) == 0xF1
    assert Operation.XNOR.apply(0b1100, 0b1010, w8) == 0xF9


def test_shifts():
    w8 = BitWidth.EIGHT
    assert Operation.SHIFT_LEFT.apply(0x81, 1, w8) == 0x02
    assert Operation.SHIFT_RIGHT.apply(0x81, 1, w8) == 0x40
    # Amount taken modulo the width
    assert Operation.SHIFT_LEFT.apply(0x81, 9, w8) == 0x02
    assert Operation.SHIFT_RIGHT.apply(0x81, 16, w8) == 0x81


@mark.parametrize('width', WIDTHS)
@mark.parametrize('value', VALUES)
def test_shift_by_width_is_identity(width, value):
    masked = value & width.mask
    assert Operation.SHIFT_LEFT.apply(masked, width.value, width) == masked
    assert Operation.SHIFT_RIGHT.apply(masked, width.value, width) == masked


def test_rotates_stay_in_window():
    w8 = BitWidth.EIGHT
    assert Operation.ROTATE_LEFT.apply(0x81, 1, w8) == 0x03
    assert Operation.ROTATE_RIGHT.apply(0x81, 1, w8) == 0xC0
    assert Operation.ROTATE_LEFT.apply(0x81, 0, w8) == 0x81
    assert Operation.ROTATE_RIGHT.apply(0x81, 8, w8) == 0x81
    assert Operation.ROTATE_LEFT.apply(1, 63, BitWidth.SIXTY_FOUR) == 2 ** 63
    assert Operation.ROTATE_RIGHT.apply(1, 1, BitWidth.THIRTY_TWO) == 2 ** 31


@mark.parametrize('width', WIDTHS)
@mark.parametrize('value', VALUES)
def test_rotate_round_trip(width, value):
    masked = value & width.mask
    for k in (0, 1, 3, width.value - 1, width.value, width.value + 5, 1000):
        rotated = Operation.ROTATE_LEFT.apply(masked, k, width)
        assert Operation.ROTATE_RIGHT.apply(rotated, k, width) == masked


def test_sign_extend():
    w8 = BitWidth.EIGHT
    assert sign_extend(0xFF, w8) == -1
    assert sign_extend(0x80, w8) == -128
    assert sign_extend(0x7F, w8) == 127
    assert sign_extend(2 ** 63, BitWidth.SIXTY_FOUR) == -2 ** 63


def test_pending_symbols():
    assert Operation.ADD.value == '+'
    assert Operation.SUBTRACT.value == '\N{MINUS SIGN}'
    assert Operation.ROTATE_RIGHT.value == 'ROR'
