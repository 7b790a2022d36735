"""Builder: assemble an interview from an interviewer and a candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Interviewer(Protocol):
    def question(self) -> tuple[str, ...]: ...


class Candidate(Protocol):
    def answer(self) -> tuple[str, ...]: ...


class ProgrammerInterviewer:
    """Asks the programmer interview questions."""

    def question(self) -> tuple[str, ...]:
        return ("你叫什么名字", "冒泡排序的复杂度是多少？")


class SalesmanInterviewer:
    """Asks the sales interview questions."""

    def question(self) -> tuple[str, ...]:
        return ("你叫什么名字", "上家公司的年销售额是多少")


class ProgrammerCandidate:
    """Answers the programmer interview questions."""

    def answer(self) -> tuple[str, ...]:
        return ("我的名字叫张三", "冒泡排序的时间复杂度是O(n^2)")


class SalesmanCandidate:
    """Answers the sales interview questions."""

    def answer(self) -> tuple[str, ...]:
        return ("我的名字叫李四", "上家公司年销售额是 5000 万")


@dataclass(frozen=True)
class Interview:
    """An interview: one interviewer asks, one candidate answers."""

    interviewer: Interviewer
    candidate: Candidate

    def question(self) -> tuple[str, ...]:
        return self.interviewer.question()

    def answer(self) -> tuple[str, ...]:
        return self.candidate.answer()


class Builder:
    """Builds a complete interview for a position."""

    def programmer(self) -> Interview:
        return Interview(ProgrammerInterviewer(), ProgrammerCandidate())

    def salesman(self) -> Interview:
        return Interview(SalesmanInterviewer(), SalesmanCandidate())


def main(argv=None) -> int:
    builder = Builder()
    for interview in (builder.programmer(), builder.salesman()):
        print("\n".join(interview.question()))
        print("\n".join(interview.answer()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())