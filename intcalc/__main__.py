import argparse
import json
import logging
import sys

import termcolor

from intcalc.errors import ParseError, format_error_place
from intcalc.parameters import load_parameters
from intcalc.parser import evaluate
from intcalc.tokenizer import Tokenizer, format_tokens


ARITHMETIC_FAULTS = (OverflowError, ZeroDivisionError, ValueError)
QUIT_COMMANDS = [':q', ':x', ':quit', ':exit']


def main(argv = None):
	args = parse_arguments(argv)
	logging.basicConfig(level = logging.DEBUG if args.verbose else logging.INFO)
	parameters = retrieve_parameters(args.parameters)
	if not args.expression:
		interactive_terminal(parameters, args.tokens)
		return 0
	status = 0
	for expression in args.expression:
		if not run_expression(expression, parameters, args.tokens):
			status = 1
	return status


def parse_arguments(argv = None):
	parser = argparse.ArgumentParser(prog = 'intcalc', description = 'Evaluate integer arithmetic expressions')
	parser.add_argument('expression', nargs = '*', help = 'Expressions to evaluate. Starts an interactive terminal if none are given')
	parser.add_argument('-t', '--tokens', action = 'store_true', help = 'Display the tokens of each expression rather than evaluating it')
	parser.add_argument('-p', '--parameters', action = 'append', default = [], metavar = 'FILE', help = 'JSON file of parameters to load, may be repeated')
	parser.add_argument('-v', '--verbose', action = 'store_true', help = 'Show debugging output')
	return parser.parse_args(argv)


def retrieve_parameters(filenames):
	sources = []
	for i in filenames:
		with open(i) as f:
			sources.append(json.load(f))
	return load_parameters(sources)


def run_expression(expression, parameters, show_tokens):
	''' Print the result of a single expression.
		Returns False if it could not be parsed.
	'''
	if show_tokens:
		print(format_tokens(Tokenizer(expression, parameters.arithmetic.width)))
		return True
	try:
		print(evaluate(expression, parameters))
	except ParseError as e:
		termcolor.cprint(str(e), 'red')
		if e.position is not None:
			print(format_error_place(expression, e.position))
		return False
	return True


def interactive_terminal(parameters, show_tokens):
	while True:
		try:
			line = input('> ')
		except (EOFError, KeyboardInterrupt):
			break
		if line.strip() in QUIT_COMMANDS:
			break
		if line.strip() == '':
			continue
		try:
			run_expression(line, parameters, show_tokens)
		except ARITHMETIC_FAULTS as e:
			termcolor.cprint('{}: {}'.format(type(e).__name__, e), 'red')


if __name__ == '__main__':
	sys.exit(main())
