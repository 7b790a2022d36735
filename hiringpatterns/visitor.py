"""Visitor: HR staff from several departments each look over the same candidates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class HR(Protocol):
    """A department's HR, able to visit a candidate."""

    def visit(self, candidate: "Candidate") -> str: ...


@dataclass(frozen=True)
class Candidate:
    """A candidate and their career."""

    name: str
    career: str

    def accept(self, hr: HR) -> str:
        return hr.visit(self)


@dataclass
class CandidateList:
    """The candidates an HR visitor walks through."""

    candidates: list[Candidate] = field(default_factory=list)

    def add(self, candidate: Candidate) -> None:
        self.candidates.append(candidate)

    def accept(self, hr: HR) -> list[str]:
        """Let the visitor see every candidate in order."""
        return [candidate.accept(hr) for candidate in self.candidates]


class SalesHR:
    """HR of the sales department, looking for salesmen."""

    def visit(self, candidate: Candidate) -> str:
        if candidate.career == "销售":
            return f"{candidate.name} 一名销售，这就是我们想要的"
        return f"{candidate.name} 不是一名销售，这不是我们想要的"


class TechnologyHR:
    """HR of the technology department, looking for programmers."""

    def visit(self, candidate: Candidate) -> str:
        if candidate.career == "程序员":
            return f"{candidate.name} 是一名程序员，这就是我们想要的"
        return f"{candidate.name} 不是一名程序员，这不是我们想要的"


def main(argv=None) -> int:
    candidates = CandidateList()
    candidates.add(Candidate("张三", "程序员"))
    candidates.add(Candidate("李四", "销售"))
    for hr in (SalesHR(), TechnologyHR()):
        for line in candidates.accept(hr):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())