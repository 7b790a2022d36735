"""Abstract factory: pick a factory by role, then build people for a position."""

from __future__ import annotations

from typing import Optional, Protocol


class Person(Protocol):
    """Anyone who can introduce themselves."""

    def about_myself(self) -> str: ...


class ProgrammerCandidate:
    """A candidate for a programmer position."""

    def about_myself(self) -> str:
        return "我是一名程序员候选人"


class SalesmanCandidate:
    """A candidate for a sales position."""

    def about_myself(self) -> str:
        return "我是一名销售"


class ProgrammerInterviewer:
    """An interviewer for programmer positions."""

    def about_myself(self) -> str:
        return "我是一名程序员面试官"


class SalesmanInterviewer:
    """An interviewer for sales positions."""

    def about_myself(self) -> str:
        return "我是一名销售面试官"


class Factory:
    """Base factory: builds nothing unless a subclass says otherwise."""

    def get_candidate(self, name: str) -> Optional[Person]:
        return None

    def get_interviewer(self, name: str) -> Optional[Person]:
        return None


class CandidateFactory(Factory):
    """Builds candidates by position name."""

    _CANDIDATES = {
        "programmer": ProgrammerCandidate,
        "salesman": SalesmanCandidate,
    }

    def get_candidate(self, name: str) -> Optional[Person]:
        kind = self._CANDIDATES.get(name)
        return kind() if kind else None


class InterviewerFactory(Factory):
    """Builds interviewers by position name."""

    _INTERVIEWERS = {
        "programmer": ProgrammerInterviewer,
        "salesman": SalesmanInterviewer,
    }

    def get_interviewer(self, name: str) -> Optional[Person]:
        kind = self._INTERVIEWERS.get(name)
        return kind() if kind else None


class AbstractFactory:
    """Hands out the factory for a role: "candidate" or "interviewer"."""

    _FACTORIES = {
        "candidate": CandidateFactory,
        "interviewer": InterviewerFactory,
    }

    def get_factory(self, name: str) -> Optional[Factory]:
        kind = self._FACTORIES.get(name)
        return kind() if kind else None


def main(argv=None) -> int:
    abstract_factory = AbstractFactory()

    interviewers = abstract_factory.get_factory("interviewer")
    for position in ("programmer", "salesman"):
        print(interviewers.get_interviewer(position).about_myself())

    candidates = abstract_factory.get_factory("candidate")
    for position in ("programmer", "salesman"):
        print(candidates.get_candidate(position).about_myself())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())