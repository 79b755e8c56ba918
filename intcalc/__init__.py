''' Integer calculator

	Evaluates arithmetic expressions made from whole numbers,
	the operators + - * / ^ and parentheses.

'''

from . import tokenizer
from . import operators
from . import parser
from . import errors

from .errors import ParseError
from .parameters import load_parameters
from .parser import Evaluator, evaluate
from .tokenizer import Tokenizer, tokenize
