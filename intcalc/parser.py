''' Precedence climbing evaluator.

	Tokens are pulled from the tokenizer one at a time,
	with a single token of lookahead. Each call to
	compute_expression is given the lowest precedence of
	operator that it is allowed to consume, which is what
	gives rise to the precedence and associativity rules.

'''

import logging

from . import operators
from .errors import ParseError
from .operators import Associativity
from .parameters import default_parameters
from .tokenizer import Tokenizer, Number, Symbol


log = logging.getLogger(__name__)

LOWEST_PRECEDENCE = 1

_NOTHING = object()


class Evaluator:

	def __init__(self, source, parameters = None):
		self.source = source
		self.parameters = default_parameters() if parameters is None else parameters
		self.reset()

	def reset(self):
		self.tokens = Tokenizer(self.source, self.parameters.arithmetic.width)
		self._lookahead = _NOTHING
		self._location = None
		self.depth = 0

	def peek(self):
		''' Get the next token without consuming it.
			Returns None at the end of the stream.
		'''
		if self._lookahead is _NOTHING:
			self._lookahead = next(self.tokens, None)
			self._location = self.tokens.location
		return self._lookahead

	def eat(self):
		token = self.peek()
		self._lookahead = _NOTHING
		return token

	def error_location(self):
		if self.peek() is not None:
			return self._location
		if self.tokens.halted_at is not None:
			return self.tokens.halted_at
		return len(self.source)

	def fail(self, description):
		position = self.error_location()
		log.debug('Failed to parse %r at %s: %s', self.source, position, description)
		raise ParseError(description, position)

	def evaluate(self) -> int:
		log.debug('Evaluating %r', self.source)
		result = self.compute_expression(LOWEST_PRECEDENCE)
		if self.peek() is not None or self.tokens.halted_at is not None:
			self.fail('Unexpected trailing input')
		log.debug('%r evaluated to %d', self.source, result)
		return result

	def compute_expression(self, min_precedence: int) -> int:
		self.depth += 1
		if self.depth > self.parameters.parser.nesting_limit:
			self.fail('Expression is nested too deeply')
		left = self.compute_atom()
		while True:
			token = self.peek()
			if token is None or not operators.is_operator(token):
				break
			if operators.precedence(token) < min_precedence:
				break
			next_precedence = operators.precedence(token)
			if operators.associativity(token) is Associativity.LEFT:
				next_precedence += 1
			self.eat()
			right = self.compute_expression(next_precedence)
			left = operators.compute(
				token, left, right,
				self.parameters.arithmetic.width,
				self.parameters.arithmetic.overflow
			)
		self.depth -= 1
		return left

	def compute_atom(self) -> int:
		token = self.peek()
		if isinstance(token, Number):
			self.eat()
			return token.value
		if token is Symbol.LEFT_PAREN:
			self.eat()
			result = self.compute_expression(LOWEST_PRECEDENCE)
			if self.peek() is not Symbol.RIGHT_PAREN:
				self.fail('Expected a closing parenthesis')
			self.eat()
			return result
		self.fail('Expected a number or left parenthesis')


def evaluate(source, parameters = None):
	''' Evaluate an expression '''
	return Evaluator(source, parameters).evaluate()
