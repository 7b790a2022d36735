"""Proxy: reach a position's job description through a stand-in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Interview(Protocol):
    """Anything with a job description."""

    def job_description(self) -> str: ...


class Programmer:
    """A programmer position."""

    def job_description(self) -> str:
        return "这是一份后端程序员的岗位，要求应聘者需要有后端相关开发经验，熟悉服务端开发"


class Salesman:
    """A sales position."""

    def job_description(self) -> str:
        return "这是一份销售的工作，需要应聘者语言表达能力强，有销售相关的工作经验"


@dataclass
class Proxy:
    """Stands in for an interview and forwards to it."""

    interview: Interview

    def job_description(self) -> str:
        return self.interview.job_description()


def main(argv=None) -> int:
    print(Proxy(Programmer()).job_description())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())