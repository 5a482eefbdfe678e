import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from bflab.config import Settings
from bflab.errors import InvalidArgument
from bflab.evaluation import (
    EvaluationReport,
    analyze_all_sboxes,
    analyze_function,
    analyze_sbox,
    covering_bound,
)
from bflab.function import BooleanFunction, FunctionSpec, SBoxSpec
from bflab.vectorial import SBoxRegistry

SETTINGS = Settings()


# ---------------------------------------------------------------------------
# Single functions
# ---------------------------------------------------------------------------

def test_analyze_xor_spec():
    spec = FunctionSpec(name="xor", variable_count=2, truth_table="0110")
    result = analyze_function(spec, settings=SETTINGS)
    assert result.name == "xor"
    assert result.is_balanced is True
    assert result.nonlinearity == 0
    assert result.algebraic_degree == 1
    assert result.is_affine
    assert result.spectral_radius == 4
    assert result.max_autocorrelation == 4
    assert "xor" in result.summary()
    assert result.to_dict()["is_affine"] is True


def test_analyze_bent_function():
    # x0*x1 + x2*x3 is bent: nonlinearity meets the covering bound
    table = [bool(((x & 1) and (x >> 1) & 1) ^ ((x >> 2) & 1 and (x >> 3) & 1)) for x in range(16)]
    result = analyze_function(BooleanFunction.from_truth_table(table), name="bent", settings=SETTINGS)
    assert result.nonlinearity == 6
    assert result.nonlinearity == covering_bound(4)
    assert result.max_autocorrelation == 0
    assert result.anf_expression == "x0*x1 + x2*x3"
    assert result.is_balanced is False


def test_analyze_function_respects_max_variables():
    small = Settings(max_variables=2)
    with pytest.raises(InvalidArgument):
        analyze_function(FunctionSpec(variable_count=3, code=5), settings=small)
    with pytest.raises(InvalidArgument):
        analyze_function(BooleanFunction.from_code(5, 3), settings=small)


# ---------------------------------------------------------------------------
# S-boxes
# ---------------------------------------------------------------------------

def test_analyze_present():
    result = analyze_sbox("sbox.present", settings=SETTINGS)
    assert result.nonlinearity == 4
    assert result.linear_components == 0
    assert result.linearity == "good"
    assert result.is_bijective is True
    assert result.is_balanced is True
    assert result.algebraic_degree == 3
    assert "sbox.present" in result.summary()


def test_analyze_custom_spec():
    spec = SBoxSpec(name="dependent", input_bits=2, output_bits=2, table=[0, 3, 0, 3])
    result = analyze_sbox(spec, settings=SETTINGS)
    assert result.is_balanced is False
    assert result.is_bijective is False
    assert result.linear_components == 3
    assert result.linearity == "poor"


def test_analyze_unknown_sbox():
    with pytest.raises(KeyError):
        analyze_sbox("sbox.nope", settings=SETTINGS)


def test_analyze_all_4bit_sboxes():
    results = analyze_all_sboxes(settings=SETTINGS, max_input_bits=4)
    ids = [r.sbox_id for r in results]
    assert ids == sorted(ids)
    assert "sbox.identity4" not in ids
    assert "sbox.aes" not in ids
    assert len(results) == 10
    assert all(r.nonlinearity == 4 for r in results)


def test_analyze_all_sboxes_fails_fast():
    narrow = Settings(max_variables=4)
    with pytest.raises(InvalidArgument, match="sbox.aes"):
        analyze_all_sboxes(settings=narrow)
    # the same limit is fine once wide S-boxes are filtered out
    assert len(analyze_all_sboxes(settings=narrow, max_input_bits=4)) == 10


def test_analyze_sbox_respects_max_variables():
    with pytest.raises(InvalidArgument):
        analyze_sbox("sbox.aes", settings=Settings(max_variables=6))


# ---------------------------------------------------------------------------
# Registry and specs
# ---------------------------------------------------------------------------

def test_registry():
    reg = SBoxRegistry()
    assert reg.exists("sbox.aes")
    assert "sbox.present" in reg.list_ids(input_bits=4)
    assert "sbox.aes" not in reg.list_ids(input_bits=4)
    with pytest.raises(KeyError):
        reg.get("sbox.nope")
    reg.register(SBoxSpec(name="sbox.swap1", input_bits=1, output_bits=1, table=[1, 0]))
    assert reg.get("sbox.swap1").is_bijective()


@pytest.mark.parametrize("kwargs", [
    dict(name="short", input_bits=2, output_bits=2, table=[0, 1, 2]),
    dict(name="wide", input_bits=2, output_bits=2, table=[0, 1, 2, 4]),
    dict(name="negative", input_bits=1, output_bits=1, table=[0, -1]),
])
def test_sbox_spec_validation(kwargs):
    with pytest.raises(ValidationError):
        SBoxSpec(**kwargs)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def test_report_aggregates_results():
    xor = analyze_function(FunctionSpec(name="xor", variable_count=2, code=6), settings=SETTINGS)
    bent = analyze_function(FunctionSpec(name="and", variable_count=2, code=8), settings=SETTINGS)
    weak = analyze_sbox(
        SBoxSpec(name="dependent", input_bits=2, output_bits=2, table=[0, 3, 0, 3]),
        settings=SETTINGS,
    )
    strong = analyze_sbox("sbox.gift", settings=SETTINGS)

    report = EvaluationReport(function_results=[xor, bent], sbox_results=[weak, strong])
    d = report.to_dict()
    assert report.timestamp
    assert d["summary"]["total_functions"] == 2
    assert d["summary"]["affine_functions"] == ["xor"]
    assert d["summary"]["sboxes_with_linear_components"] == ["dependent"]
    assert d["summary"]["all_functions_balanced"] is False
    text = report.to_summary()
    assert "1/2 balanced" in text
    assert "sbox.gift" in text
