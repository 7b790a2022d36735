"""Decorator: add a second round to the standard interview rounds."""

from __future__ import annotations


class BaseInterview:
    """The standard first and last rounds."""

    def first_interview(self) -> str:
        return "这是第一轮面试"

    def last_interview(self) -> str:
        return "这是最后一轮面试"


class ProgrammerInterview(BaseInterview):
    """A programmer interview, with an extra second round."""

    def second_interview(self) -> str:
        return "这是第二轮面试"


def main(argv=None) -> int:
    interview = ProgrammerInterview()
    print(interview.first_interview())
    print(interview.second_interview())
    print(interview.last_interview())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())