"""Iterator: walk a list of resumes one by one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Resume:
    """A resume, known by the candidate's name."""

    name: str


class ResumeIterator:
    """Yields the resumes of a list in order, once."""

    def __init__(self, resumes: Iterable[Resume]) -> None:
        self.resumes = list(resumes)
        self.index = 0

    def __iter__(self) -> "ResumeIterator":
        return self

    def __next__(self) -> Resume:
        if self.index >= len(self.resumes):
            raise StopIteration
        resume = self.resumes[self.index]
        self.index += 1
        return resume


def get_resumes() -> ResumeIterator:
    return ResumeIterator([Resume("张三"), Resume("李四")])


def main(argv=None) -> int:
    for resume in get_resumes():
        print(resume.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())