from pathlib import Path

from geoexpr.reference import BNF, SEMANTICS, get_reference


def test_bnf_matches_docs():
    docs_path = Path(__file__).resolve().parents[1] / "docs" / "bnf.txt"
    assert docs_path.exists(), "expected docs/bnf.txt to exist"
    assert BNF == docs_path.read_text(encoding="utf-8").strip()


def test_reference_includes_bnf_by_default():
    reference = get_reference()
    assert "SYNTAX REFERENCE (BNF)" in reference
    assert BNF in reference
    assert SEMANTICS in reference


def test_reference_can_skip_bnf():
    reference = get_reference(include_bnf=False)
    assert "SYNTAX REFERENCE" not in reference
    assert BNF not in reference
