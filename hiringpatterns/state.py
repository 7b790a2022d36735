"""State: the message a candidate receives depends on the interview round."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A candidate and the result of their current round."""

    name: str
    result: str


class First:
    """The first round."""

    def deal(self, candidate: Candidate) -> str:
        return f"{candidate.name} 先生/女士，您第一轮面试的结果是 {candidate.result}"


class Second:
    """The second round."""

    def deal(self, candidate: Candidate) -> str:
        return f"{candidate.name} 先生/女士，您第二轮面试的结果是 {candidate.result}"


class Last:
    """The final round."""

    def deal(self, candidate: Candidate) -> str:
        return f"{candidate.name} 先生/女士，您最终面试的结果是 {candidate.result}"


def main(argv=None) -> int:
    candidate = Candidate("张三", "通过")
    for stage in (First(), Second(), Last()):
        print(stage.deal(candidate))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())