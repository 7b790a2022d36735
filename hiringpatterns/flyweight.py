"""Flyweight: resumes are shared by name, so every lookup sees the same data."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ProgrammerResume:
    """A programmer's resume."""

    name: str = ""
    age: int = 0
    experience: int = 0

    def description(self) -> str:
        return f"我的姓名是 {self.name}，今年 {self.age} 岁，有 {self.experience} 年工作经验"


@dataclass
class ResumeFactory:
    """Hands out one shared resume per name, creating it on first request."""

    resumes: dict[str, ProgrammerResume] = field(default_factory=dict)

    def get_instance(self, name: str) -> ProgrammerResume:
        resume = self.resumes.get(name)
        if resume is None:
            resume = self.resumes[name] = ProgrammerResume(name=name)
        return resume


def main(argv=None) -> int:
    factory = ResumeFactory()

    resume = factory.get_instance("张三")
    resume.age = 25
    resume.experience = 3

    resume = factory.get_instance("李四")
    resume.age = 30
    resume.experience = 5

    first = factory.get_instance("张三")
    print(first.description())

    second = factory.get_instance("张三")
    second.name = "王五"
    second.age = 35
    second.experience = 10

    print(first.description())
    print(second.description())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())