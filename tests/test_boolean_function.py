import dataclasses
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from bflab.errors import InvalidArgument, InvalidLength
from bflab.function import (
    BooleanFunction,
    FunctionSpec,
    compute_all,
    compute_anf,
    compute_autocorrelation,
    compute_balancedness,
    compute_walsh,
)

F, T = False, True


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_from_code_and_from_truth_table_agree():
    a = BooleanFunction.from_code(6, 2)
    b = BooleanFunction.from_truth_table([F, T, T, F])
    assert a.truth_table == (F, T, T, F)
    assert b.decimal_code == 6
    assert b.variable_count == 2
    assert a == b


def test_polar_table():
    bf = BooleanFunction.from_code(6, 2)
    assert bf.polar_table == [1, -1, -1, 1]
    assert bf.size == 4


def test_construction_failures():
    with pytest.raises(InvalidLength):
        BooleanFunction.from_truth_table([F, T, T])
    with pytest.raises(InvalidLength):
        BooleanFunction.from_truth_table([F, T, T, F], variable_count=3)
    with pytest.raises(InvalidArgument):
        BooleanFunction.from_code(16, 2)
    with pytest.raises(InvalidArgument):
        BooleanFunction.from_code(1, 0)
    with pytest.raises(InvalidArgument):
        BooleanFunction(variable_count=2, truth_table=(F, T, T, F), decimal_code=5)


def test_model_is_immutable():
    bf = BooleanFunction.from_code(6, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        bf.nonlinearity = 3
    with pytest.raises(InvalidArgument):
        bf.with_properties(truth_table=(F, F, F, F))


# ---------------------------------------------------------------------------
# Property slots
# ---------------------------------------------------------------------------

def test_properties_start_unset():
    bf = BooleanFunction.from_code(6, 2)
    assert bf.computed() == []
    assert bf.nonlinearity is None
    with pytest.raises(InvalidArgument):
        bf.require("nonlinearity")
    with pytest.raises(InvalidArgument):
        bf.require("truth_table")


def test_compute_walsh_returns_populated_copy():
    bf = BooleanFunction.from_code(6, 2)
    done = compute_walsh(bf)
    assert bf.walsh_spectrum is None
    assert done.walsh_spectrum == (0, 0, 0, 4)
    assert done.spectral_radius == 4
    assert done.nonlinearity == 0
    assert done.algebraic_degree is None


def test_xor_scenario():
    bf = compute_all(BooleanFunction.from_truth_table([F, T, T, F]))
    assert bf.is_balanced is True
    assert bf.nonlinearity == 0
    assert bf.algebraic_degree == 1
    assert bf.anf_expression == "x0 + x1"


def test_constant_zero_scenario():
    bf = compute_all(BooleanFunction.from_truth_table([F] * 8))
    assert bf.is_balanced is False
    assert bf.algebraic_degree == 0
    assert bf.spectral_radius == 8
    assert bf.nonlinearity == 0
    assert bf.autocorrelation == (8,) * 8


def test_individual_routines():
    bf = BooleanFunction.from_code(0b10000000, 3)  # x0*x1*x2
    assert compute_anf(bf).algebraic_degree == 3
    assert compute_balancedness(bf).is_balanced is False
    ac = compute_autocorrelation(bf)
    assert ac.walsh_spectrum is not None
    assert ac.autocorrelation[0] == 8
    assert ac.max_autocorrelation == 4


def test_to_dict_is_plain_data():
    d = compute_all(BooleanFunction.from_code(6, 2)).to_dict()
    assert d["truth_table"] == [0, 1, 1, 0]
    assert d["anf"] == [0, 1, 1, 0]
    assert d["walsh_spectrum"] == [0, 0, 0, 4]
    assert d["decimal_code"] == 6


# ---------------------------------------------------------------------------
# FunctionSpec
# ---------------------------------------------------------------------------

def test_function_spec_builds_both_ways():
    by_code = FunctionSpec(name="xor", variable_count=2, code=6).build()
    by_table = FunctionSpec(name="xor", variable_count=2, truth_table="0110").build()
    assert by_code == by_table


@pytest.mark.parametrize("kwargs", [
    dict(variable_count=2),
    dict(variable_count=2, code=6, truth_table="0110"),
    dict(variable_count=2, truth_table="011"),
    dict(variable_count=2, truth_table="01a0"),
    dict(variable_count=2, code=16),
    dict(variable_count=0, code=0),
])
def test_function_spec_validation(kwargs):
    with pytest.raises(ValidationError):
        FunctionSpec(**kwargs)
