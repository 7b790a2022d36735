"""Bridge: an interview advertises through a job description for its position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class JobDescription(Protocol):
    """Writes the advertisement for a position."""

    def describe(self, age: int, salary: int, experience: int) -> str: ...


class ProgrammerJob:
    """The job description of a programmer."""

    def describe(self, age: int, salary: int, experience: int) -> str:
        return (
            f"我们希望招聘一名程序员同学，要求年龄 {age}，"
            f"有 {experience} 年工作经验，月薪为 {salary}"
        )


class SalesmanJob:
    """The job description of a salesman."""

    def describe(self, age: int, salary: int, experience: int) -> str:
        return (
            f"我们希望招聘一名销售同学，要求年龄 {age}，"
            f"有 {experience} 年工作经验，月薪为 {salary}"
        )


@dataclass
class Interview:
    """An opening with its requirements and the description to publish."""

    age: int
    salary: int
    experience: int
    job: JobDescription

    def advertise(self) -> str:
        return self.job.describe(self.age, self.salary, self.experience)


def main(argv=None) -> int:
    openings = [
        Interview(age=25, salary=5000, experience=3, job=SalesmanJob()),
        Interview(age=25, salary=8000, experience=3, job=ProgrammerJob()),
    ]
    for opening in openings:
        print(opening.advertise())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())