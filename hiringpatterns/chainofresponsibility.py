"""Chain of responsibility: a resume is passed along until someone handles its status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Status(IntEnum):
    """Where a resume stands in the hiring process."""

    COMMUNICATION = 1
    INTERVIEW = 2
    PASS = 3


@dataclass(frozen=True)
class Resume:
    """A candidate's resume and its current status."""

    name: str
    status: Status


class Handler:
    """One link of the chain; handles a single status and forwards the rest."""

    status: Status
    template: str

    def __init__(self) -> None:
        self.next: Optional[Handler] = None

    def set_next(self, handler: "Handler") -> "Handler":
        """Link the handler that takes what this one does not; return it."""
        self.next = handler
        return handler

    def deal(self, resume: Resume) -> str:
        """Handle the resume here or pass it down the chain."""
        if resume.status == self.status:
            return self.template.format(name=resume.name)
        if self.next is None:
            raise LookupError(f"no handler for status {resume.status!r}")
        return self.next.deal(resume)


class HR(Handler):
    """Arranges the interviews."""

    status = Status.COMMUNICATION
    template = "你好，{name}，我是公司的 hr，负责与您沟通后续的面试事宜"


class Programmer(Handler):
    """Conducts the interview."""

    status = Status.INTERVIEW
    template = "你好，{name}，我是公司的面试官，负责您的面试工作"


class HRD(Handler):
    """Settles salary and onboarding."""

    status = Status.PASS
    template = "你好，{name}，我是公司的 hrd，负责与您沟通薪资和入职的事宜"


def build_chain() -> Handler:
    """Return the head of the chain HR -> Programmer -> HRD."""
    hr = HR()
    hr.set_next(Programmer()).set_next(HRD())
    return hr


def main(argv=None) -> int:
    chain = build_chain()
    print(chain.deal(Resume("张三", Status.PASS)))
    print(chain.deal(Resume("李四", Status.INTERVIEW)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())