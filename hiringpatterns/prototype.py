"""Prototype: make new resumes by copying an existing one."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class Resume:
    """A candidate's resume."""

    name: str = ""
    mobile: str = ""

    def clone(self) -> "Resume":
        """Return an independent copy of this resume."""
        return copy.copy(self)


def main(argv=None) -> int:
    first = Resume(name="张三", mobile="123")

    second = first.clone()
    second.name = "李四"
    second.mobile = "456"

    for resume in (first, second):
        print(resume.name)
        print(resume.mobile)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())