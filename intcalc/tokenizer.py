import enum
import typing


DIGITS = '0123456789'


class Symbol(enum.Enum):
	PLUS        = '+'
	MINUS       = '-'
	MULTIPLY    = '*'
	DIVIDE      = '/'
	POWER       = '^'
	LEFT_PAREN  = '('
	RIGHT_PAREN = ')'

	def __str__(self):
		return self.value


class Number(typing.NamedTuple):
	value: int

	def __str__(self):
		return str(self.value)


Token = typing.Union[Number, Symbol]

SYMBOLS = {s.value: s for s in Symbol}


def integer_range(width):
	''' Smallest and largest values of a signed integer with the given number of bits '''
	return -(1 << (width - 1)), (1 << (width - 1)) - 1


class Tokenizer:

	''' Lazily converts a string into a sequence of tokens.

		Whitespace is skipped. The sequence stops early if a character
		is not part of the language, or if a number is too big to fit
		into `width` bits. In that case `halted_at` holds the offset
		of the offending input, otherwise it is None.
	'''

	def __init__(self, source: str, width: int = 32):
		self.source = source
		self.width = width
		self.reset()

	def reset(self):
		self.place = 0
		self.location = None
		self.halted_at = None
		self._done = False

	def __iter__(self):
		return self

	def __next__(self) -> Token:
		if self._done:
			raise StopIteration
		self.consume_whitespace()
		c = self.peek()
		if c is None:
			token = None
		elif c in DIGITS:
			token = self.scan_number()
		else:
			token = self.scan_operator()
		if token is None:
			self._done = True
			raise StopIteration
		return token

	def peek(self):
		if self.place < len(self.source):
			return self.source[self.place]
		return None

	def consume_whitespace(self):
		while self.place < len(self.source) and self.source[self.place].isspace():
			self.place += 1

	def scan_number(self) -> typing.Optional[Number]:
		start = self.place
		while self.place < len(self.source) and self.source[self.place] in DIGITS:
			self.place += 1
		digits = self.source[start:self.place]
		_, highest = integer_range(self.width)
		# Leading zeros are stripped so that int() never sees a huge string
		significant = digits.lstrip('0') or '0'
		if not digits or len(significant) > len(str(highest)) or int(significant) > highest:
			self.halted_at = start
			return None
		self.location = start
		return Number(int(digits))

	def scan_operator(self) -> typing.Optional[Symbol]:
		start = self.place
		self.place += 1
		symbol = SYMBOLS.get(self.source[start])
		if symbol is None:
			self.halted_at = start
			return None
		self.location = start
		return symbol


def tokenize(source, width = 32):
	return list(Tokenizer(source, width))


def format_tokens(tokens):
	return ''.join(map(str, tokens))
