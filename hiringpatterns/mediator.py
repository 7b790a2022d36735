"""Mediator: departments share candidate details through one talent pool."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Candidate:
    """A candidate and their career."""

    name: str
    career: str


class Talents:
    """The shared talent pool that presents candidates to everyone."""

    def show_candidate(self, candidate: Candidate) -> str:
        return f"这名候选人的姓名是 {candidate.name}，职业是 {candidate.career}。"


@dataclass
class Department:
    """A department that talks to others only through the talent pool."""

    talents: Talents = field(default_factory=Talents)

    def show_candidate(self, candidate: Candidate) -> str:
        return self.talents.show_candidate(candidate)


class Sales(Department):
    """The sales department."""


class Technology(Department):
    """The technology department."""


def main(argv=None) -> int:
    talents = Talents()
    sales = Sales(talents)
    technology = Technology(talents)
    print(sales.show_candidate(Candidate("张三", "销售")))
    print(technology.show_candidate(Candidate("李四", "程序员")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())