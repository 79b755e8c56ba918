''' Binary operators and the fixed width arithmetic behind them '''

import enum
import collections

from .tokenizer import Symbol, integer_range
from .errors import ParseError


class Associativity(enum.Enum):
	LEFT  = 0
	RIGHT = 1


Operator = collections.namedtuple('Operator', ['precedence', 'associativity', 'function'])


def fit_integer(value, width, overflow):
	''' Bring an exact result back into the range of a `width` bit integer '''
	lowest, highest = integer_range(width)
	if lowest <= value <= highest:
		return value
	if overflow == 'wrap':
		return (value - lowest) % (1 << width) + lowest
	raise OverflowError('Integer overflow: {} does not fit in {} bits'.format(value, width))


def truncating_division(a, b):
	if b == 0:
		raise ZeroDivisionError('Cannot divide {} by zero'.format(a))
	quotient = abs(a) // abs(b)
	return quotient if (a < 0) == (b < 0) else -quotient


def integer_power(base, exponent, width, overflow):
	if exponent < 0:
		raise ValueError('Cannot raise {} to the negative power {}'.format(base, exponent))
	if overflow == 'wrap':
		return fit_integer(pow(base, exponent, 1 << width), width, overflow)
	if abs(base) >= 2 and exponent >= width:
		raise OverflowError('Integer overflow: {} ^ {} does not fit in {} bits'.format(base, exponent, width))
	return base ** exponent


OPERATORS = {
	Symbol.PLUS:     Operator(1, Associativity.LEFT,  lambda a, b, w, o: a + b),
	Symbol.MINUS:    Operator(1, Associativity.LEFT,  lambda a, b, w, o: a - b),
	Symbol.MULTIPLY: Operator(2, Associativity.LEFT,  lambda a, b, w, o: a * b),
	Symbol.DIVIDE:   Operator(2, Associativity.LEFT,  lambda a, b, w, o: truncating_division(a, b)),
	Symbol.POWER:    Operator(3, Associativity.RIGHT, integer_power),
}


def is_operator(token):
	return isinstance(token, Symbol)


def precedence(token):
	operator = OPERATORS.get(token)
	return 0 if operator is None else operator.precedence


def associativity(token):
	operator = OPERATORS.get(token)
	return Associativity.LEFT if operator is None else operator.associativity


def compute(token, left, right, width = 32, overflow = 'raise'):
	operator = OPERATORS.get(token)
	if operator is None:
		raise ParseError('Unknown expression')
	return fit_integer(operator.function(left, right, width, overflow), width, overflow)
