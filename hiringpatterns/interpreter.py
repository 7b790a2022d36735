"""Interpreter: check values against small composable rules, such as being a teenager."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence


class Expression(Protocol):
    """A rule that accepts or rejects one value."""

    def interpret(self, context: Any) -> bool: ...


@dataclass(frozen=True)
class Match:
    """Accepts a string equal to the given text."""

    text: str

    def interpret(self, context: Any) -> bool:
        return isinstance(context, str) and context == self.text


@dataclass(frozen=True)
class Range:
    """Accepts an integer in the half-open interval [minimum, maximum)."""

    minimum: int
    maximum: int

    def interpret(self, context: Any) -> bool:
        if not isinstance(context, int) or isinstance(context, bool):
            return False
        return self.minimum <= context < self.maximum


@dataclass
class AndExpression:
    """Accepts a sequence whose values satisfy each rule in turn."""

    expressions: list[Expression] = field(default_factory=list)

    def add(self, expression: Expression) -> None:
        self.expressions.append(expression)

    def interpret(self, contexts: Sequence[Any]) -> bool:
        if len(contexts) < len(self.expressions):
            return False
        return all(e.interpret(c) for e, c in zip(self.expressions, contexts))


def teen_expression() -> AndExpression:
    """Rule for ("Age", n) with 12 <= n < 18."""
    teen = AndExpression()
    teen.add(Match("Age"))
    teen.add(Range(12, 18))
    return teen


def is_teen(values: Sequence[Any]) -> bool:
    return teen_expression().interpret(values)


def _show(values: Sequence[Any]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def main(argv=None) -> int:
    for values in (["Age", 12], ["ID", 1], ["Age", 22]):
        if is_teen(values):
            print(f"这是一个青少年：{_show(values)}")
        else:
            print(f"这不是一个青少年：{_show(values)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())