# This file handles the calculator's parameter loading.

# The defaults live in parameters_default.json, and any
# number of dictionaries can be layered over the top.


import os
import json
import functools
from pydantic import BaseModel, Field
from typing import Literal


DEFAULT_PARAMETER_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'parameters_default.json')
MAXIMUM_NESTING_LIMIT = 400


def _dictionary_overwrite(old, new):
	if not isinstance(new, dict):
		return new
	if not isinstance(old, dict):
		old = {}
	for key in new:
		old[key] = _dictionary_overwrite(old.get(key), new[key])
	return old


def dictionary_overwrite(*dicts):
	result = {}
	for i in dicts:
		result = _dictionary_overwrite(result, i)
	return result


def resolve_parameters(params):
	if isinstance(params, dict):
		return {key : resolve_parameters(value) for key, value in params.items()}
	elif isinstance(params, list):
		return [resolve_parameters(i) for i in params]
	elif isinstance(params, str):
		if params.startswith('env:'):
			return os.environ.get(params[4:])
		if params.startswith('escape:'):
			return params[7:]
	return params


def load_parameters(sources):
	if not isinstance(sources, list):
		raise TypeError('Sources should be a list')
	default = _load_json_file(DEFAULT_PARAMETER_FILE)
	dictionary = resolve_parameters(dictionary_overwrite(default, *sources))
	return Parameters.model_validate(dictionary)


@functools.lru_cache(maxsize = None)
def default_parameters():
	''' The defaults on their own, only read from disk once '''
	return load_parameters([])


def _load_json_file(filename):
	with open(filename) as f:
		return json.load(f)


class ArithmeticModel(BaseModel):
	width: Literal[8, 16, 32, 64]
	overflow: Literal['raise', 'wrap']


class ParserModel(BaseModel):
	# Each level of nesting uses two frames of the Python stack
	nesting_limit: int = Field(gt = 0, le = MAXIMUM_NESTING_LIMIT)


class Parameters(BaseModel):
	arithmetic: ArithmeticModel
	parser: ParserModel
