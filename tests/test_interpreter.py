import pytest

from hiringpatterns.interpreter import (
    AndExpression,
    Match,
    Range,
    is_teen,
    main,
    teen_expression,
)


@pytest.mark.parametrize(
    "values, expected",
    [(["Age", 12], True), (["ID", 1], False), (["Age", 22], False)],
)
def test_is_teen_cases_from_demo(values, expected):
    assert is_teen(values) is expected


def test_range_is_half_open():
    rule = Range(12, 18)
    assert rule.interpret(12) is True
    assert rule.interpret(17) is True
    assert rule.interpret(18) is False
    assert rule.interpret(11) is False


def test_range_rejects_non_integers():
    rule = Range(0, 100)
    assert rule.interpret("5") is False
    assert rule.interpret(5.0) is False
    assert rule.interpret(True) is False


def test_match_requires_equal_string():
    rule = Match("Age")
    assert rule.interpret("Age") is True
    assert rule.interpret("age") is False
    assert rule.interpret(1) is False


def test_and_needs_enough_contexts():
    assert teen_expression().interpret(["Age"]) is False


def test_and_ignores_extra_contexts():
    assert teen_expression().interpret(["Age", 15, "extra"]) is True


def test_empty_and_accepts_anything():
    assert AndExpression().interpret([]) is True
    assert AndExpression().interpret([1, 2]) is True


def test_add_appends_rules():
    rule = AndExpression()
    rule.add(Match("x"))
    assert rule.interpret(["x"]) is True
    rule.add(Match("y"))
    assert rule.interpret(["x"]) is False
    assert rule.interpret(["x", "y"]) is True


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "这是一个青少年：[Age 12]"
    assert lines[1].startswith("这不是一个青少年")
    assert lines[2].startswith("这不是一个青少年")