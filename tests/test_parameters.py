import pytest
import pydantic

from intcalc.parameters import load_parameters, dictionary_overwrite, resolve_parameters


def test_defaults():
	parameters = load_parameters([])
	assert parameters.arithmetic.width == 32
	assert parameters.arithmetic.overflow == 'raise'
	assert parameters.parser.nesting_limit == 200


def test_layering():
	parameters = load_parameters([
		{'arithmetic': {'width': 8}},
		{'arithmetic': {'width': 16}},
		{'parser': {'nesting_limit': 50}},
	])
	assert parameters.arithmetic.width == 16
	assert parameters.arithmetic.overflow == 'raise'
	assert parameters.parser.nesting_limit == 50


def test_environment(monkeypatch):
	monkeypatch.setenv('intcalc_parameter_test', 'wrap')
	parameters = load_parameters([
		{'arithmetic': {'overflow': 'env:intcalc_parameter_test'}}
	])
	assert parameters.arithmetic.overflow == 'wrap'


def test_resolve():
	assert resolve_parameters({'a': ['escape:env:x', 'plain', 3]}) == {'a': ['env:x', 'plain', 3]}


def test_dictionary_overwrite():
	assert dictionary_overwrite(
		{'a': {'b': 1, 'c': 2}},
		{'a': {'c': 3}},
		{'d': 4}
	) == {'a': {'b': 1, 'c': 3}, 'd': 4}


def test_sources_must_be_a_list():
	with pytest.raises(TypeError):
		load_parameters({'arithmetic': {'width': 8}})


def test_invalid():
	with pytest.raises(pydantic.ValidationError):
		load_parameters([{'arithmetic': {'width': 12}}])
	with pytest.raises(pydantic.ValidationError):
		load_parameters([{'arithmetic': {'overflow': 'saturate'}}])
	with pytest.raises(pydantic.ValidationError):
		load_parameters([{'parser': {'nesting_limit': 0}}])


def test_nesting_limit_is_capped():
	assert load_parameters([{'parser': {'nesting_limit': 400}}]).parser.nesting_limit == 400
	with pytest.raises(pydantic.ValidationError):
		load_parameters([{'parser': {'nesting_limit': 401}}])
	with pytest.raises(pydantic.ValidationError):
		load_parameters([{'parser': {'nesting_limit': 100000}}])
