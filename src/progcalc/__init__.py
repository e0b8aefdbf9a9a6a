'''
Programmer's calculator.

Integer arithmetic and bitwise operators over an 8, 16, 32 or 64 bit word,
shown in hex, decimal, octal or binary. One running value, one pending
operator, one memory slot; typed expressions are reduced left to right.

No floating point, no precedence or parentheses, no arbitrary precision.
'''

from .cli import CLI
from .evaluator import Evaluator
from .lexer import Lexer
from .model import Calculator
from .numeric import Base, BitWidth, Operation, SignMode


__all__ = ('Calculator', 'Evaluator', 'Lexer', 'CLI',
           'Base', 'BitWidth', 'Operation', 'SignMode')
