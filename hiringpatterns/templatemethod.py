"""Template method: candidates share a self-introduction that subclasses refine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Candidate:
    """A candidate known by name."""

    name: str

    def about_me(self) -> str:
        return f"我的名字是 {self.name}。"


class Programmer(Candidate):
    """A candidate who is a programmer."""

    def about_me(self) -> str:
        return f"我的名字是 {self.name}，我的职业是程序员。"


class Salesman(Candidate):
    """A candidate who is a salesman."""

    def about_me(self) -> str:
        return f"我的名字是 {self.name}，我的职业是销售。"


def main(argv=None) -> int:
    candidates = [Programmer("张三"), Salesman("李四")]
    for candidate in candidates:
        print(candidate.about_me())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())