from .lexer import Lexer, parse_value
from .numeric import BitWidth, Operation


# Operator lexemes to the model's operators.
SYMBOLS = {
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
}


class Evaluator:
    '''
    Reduce an infix expression, strictly left to right, to one value.

    No precedence and no parentheses: 2 + 3 * 4 is 20. Works on the full 64
    bits; masking to the active width is up to the caller.
    '''

    def __init__(self):
        self.lexer = Lexer()

    def evaluate(self, text, radix):
        '''
        Return the value of text, or None if it isn't a whole expression.

        :param radix: Radix for literals without a 0x, 0b or 0o prefix.
        '''
        tokens = self.lexer.tokens(text)
        if not tokens:
            return None
        (kind, first), rest = tokens[0], tokens[1:]
        if kind != 'literal' or len(rest) % 2:
            return None
        result = parse_value(first, radix)
        if result is None:
            return None
        for (kind, symbol), (right_kind, token) in zip(rest[::2], rest[1::2]):
            if kind != 'operator' or right_kind != 'literal':
                return None
            right = parse_value(token, radix)
            if right is None:
                return None
            result = SYMBOLS[symbol].apply(result, right, BitWidth.SIXTY_FOUR)
        return result
