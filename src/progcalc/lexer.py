from functools import reduce
import operator

import regex

from .util import UINT64_MAX


DIGITS = '0123456789abcdef'

# Literal prefixes, overriding whatever base the caller is in.
PREFIXES = {
    '0x': 16,
    '0b': 2,
    '0o': 8,
}

# Doubled operators first, or << would lex as < <.
OPERATORS = ('<<', '>>', '+', '-', '*', '/', '%', '&', '|', '^')

_RADIX_LITERALS = {
    radix: regex.compile(r'[' + DIGITS[:radix] + r']+')
    for radix
    in (2, 8, 10, 16)
}

# Most significant digits a 64 bit value can have, per radix.
_MAX_DIGITS = {2: 64, 8: 22, 10: 20, 16: 16}


def parse_literal(text, radix):
    '''
    Parse unprefixed digits in radix, or return None.

    Unlike int(), refuses signs, underscores, whitespace and anything that
    doesn't fit in 64 unsigned bits.
    '''
    text = text.lower()
    if _RADIX_LITERALS[radix].fullmatch(text) is None:
        return None
    digits = text.lstrip('0') or '0'
    if len(digits) > _MAX_DIGITS[radix]:
        return None
    value = int(digits, radix)
    if value > UINT64_MAX:
        return None
    return value


def parse_value(token, radix):
    '''
    Parse a possibly prefixed literal, or return None.

    A 0x, 0b or 0o prefix wins over radix.
    '''
    token = token.lower()
    radix = PREFIXES.get(token[:2], radix)
    if token[:2] in PREFIXES:
        token = token[2:]
    return parse_literal(token, radix)


class Lexer:
    '''
    Lexer for the expression *regular* grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # Literal: everything up to the next operator or space. 0x, 0b and 0o
    # need no special casing since x, b and o are never operators. A lone <
    # or > is just a (bad) literal character.
    LITERAL = r'''
               (?:
                   [^\s<>+\-*/%&|^]
                   |
                   <(?!<)
                   |
                   >(?!>)
               )+
               '''
    SPACE = r'\s+'

    # All possible lexemes. Every character belongs to one, so lexing can't
    # fail; bad literals are the parser's problem.
    LEXEME = r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')|' \
             r'(?<literal>' + LITERAL + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, left to right.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            yield match
            line = line[len(match.group(0)):]

    def tokens(self, line):
        '''
        Return (kind, text) for every lexeme that isn't whitespace.
        '''
        return [(kind, text)
                for match
                in self.lex(line)
                for kind, text
                in self.matchedgroups(match).items()
                if kind != 'space']

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched group, by name.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
