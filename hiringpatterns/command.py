"""Command: pass or reject a candidate by executing the matching command."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Interviewer:
    """The person who was interviewed."""

    name: str


@dataclass(frozen=True)
class Pass:
    """Command telling the interviewee they passed."""

    interviewer: Interviewer

    def execute(self) -> str:
        return f"{self.interviewer.name} 先生/女士，恭喜您通过我们的面试。"


@dataclass(frozen=True)
class Reject:
    """Command telling the interviewee they did not pass."""

    interviewer: Interviewer

    def execute(self) -> str:
        return f"{self.interviewer.name} 先生/女士，很遗憾您没有通过我们的面试。"


def main(argv=None) -> int:
    commands = [Pass(Interviewer("张三")), Reject(Interviewer("李四"))]
    for command in commands:
        print(command.execute())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())