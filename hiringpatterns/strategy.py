"""Strategy: the pass and reject messages depend on the candidate's position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Candidate(Protocol):
    """Knows what to say when passed or rejected."""

    def on_pass(self) -> str: ...

    def on_reject(self) -> str: ...


class Programmer:
    """Messages for a programmer."""

    def on_pass(self) -> str:
        return "您优秀的专业技能给我们留下了深刻的印象，欢迎加入技术部"

    def on_reject(self) -> str:
        return "您优秀的专业技能给我们留下了深刻的印象，但是与技术部当前需求不符合，希望以后合作的机会"


class Salesman:
    """Messages for a salesman."""

    def on_pass(self) -> str:
        return "您丰富的工作经验给我们留下了深刻的印象，欢迎加入销售部"

    def on_reject(self) -> str:
        return "您丰富的工作经验给我们留下了深刻的印象，但是跟销售部当前需求不符，希望以后有合作的机会"


@dataclass(frozen=True)
class Interview:
    """An interview that delegates its outcome messages to the candidate."""

    candidate: Candidate

    def on_pass(self) -> str:
        return self.candidate.on_pass()

    def on_reject(self) -> str:
        return self.candidate.on_reject()


def main(argv=None) -> int:
    for candidate in (Programmer(), Salesman()):
        interview = Interview(candidate)
        print(interview.on_pass())
        print(interview.on_reject())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())