[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hiringpatterns"
version = "0.1.0"
description = "Classic software design patterns shown through small, runnable hiring and interview scenarios."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "patterns",
    "examples",
    "object-oriented",
    "gang-of-four",
    "enterprise-patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hiringpatterns-abstractfactory = "hiringpatterns.abstractfactory:main"
hiringpatterns-factory = "hiringpatterns.factory:main"
hiringpatterns-builder = "hiringpatterns.builder:main"
hiringpatterns-prototype = "hiringpatterns.prototype:main"
hiringpatterns-singleton = "hiringpatterns.singleton:main"
hiringpatterns-adapter = "hiringpatterns.adapter:main"
hiringpatterns-bridge = "hiringpatterns.bridge:main"
hiringpatterns-composite = "hiringpatterns.composite:main"
hiringpatterns-decorator = "hiringpatterns.decorator:main"
hiringpatterns-facade = "hiringpatterns.facade:main"
hiringpatterns-filtering = "hiringpatterns.filtering:main"
hiringpatterns-flyweight = "hiringpatterns.flyweight:main"
hiringpatterns-proxy = "hiringpatterns.proxy:main"
hiringpatterns-chainofresponsibility = "hiringpatterns.chainofresponsibility:main"
hiringpatterns-command = "hiringpatterns.command:main"
hiringpatterns-interpreter = "hiringpatterns.interpreter:main"
hiringpatterns-iterator = "hiringpatterns.iterator:main"
hiringpatterns-mediator = "hiringpatterns.mediator:main"
hiringpatterns-memento = "hiringpatterns.memento:main"
hiringpatterns-nullobject = "hiringpatterns.nullobject:main"
hiringpatterns-observer = "hiringpatterns.observer:main"
hiringpatterns-state = "hiringpatterns.state:main"
hiringpatterns-strategy = "hiringpatterns.strategy:main"
hiringpatterns-templatemethod = "hiringpatterns.templatemethod:main"
hiringpatterns-visitor = "hiringpatterns.visitor:main"
hiringpatterns-businessdelegate = "hiringpatterns.businessdelegate:main"
hiringpatterns-compositeentity = "hiringpatterns.compositeentity:main"
hiringpatterns-dataaccessobject = "hiringpatterns.dataaccessobject:main"
hiringpatterns-frontcontroller = "hiringpatterns.frontcontroller:main"
hiringpatterns-interceptingfilter = "hiringpatterns.interceptingfilter:main"
hiringpatterns-mvc = "hiringpatterns.mvc:main"
hiringpatterns-servicelocator = "hiringpatterns.servicelocator:main"
hiringpatterns-transferobject = "hiringpatterns.transferobject:main"

[tool.hatch.build.targets.wheel]
packages = ["hiringpatterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
