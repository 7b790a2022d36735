# hiringpatterns

A collection of classic design patterns, each told as a small scenario from
hiring: candidates, interviewers, résumés, HR departments and job adverts.
Every pattern lives in its own module. It can be imported and used as a
library, and it has a command that runs its demonstration scenario.

The classes return their messages as strings, or as lists or tuples of
strings. Only the `main()` functions print. The messages are in Chinese.

No third-party dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The patterns

Creational

| Module            | Command                          |
|-------------------|----------------------------------|
| `abstractfactory` | `hiringpatterns-abstractfactory` |
| `factory`         | `hiringpatterns-factory`         |
| `builder`         | `hiringpatterns-builder`         |
| `prototype`       | `hiringpatterns-prototype`       |
| `singleton`       | `hiringpatterns-singleton`       |

Structural

| Module      | Command                    |
|-------------|----------------------------|
| `adapter`   | `hiringpatterns-adapter`   |
| `bridge`    | `hiringpatterns-bridge`    |
| `composite` | `hiringpatterns-composite` |
| `decorator` | `hiringpatterns-decorator` |
| `facade`    | `hiringpatterns-facade`    |
| `filtering` | `hiringpatterns-filtering` |
| `flyweight` | `hiringpatterns-flyweight` |
| `proxy`     | `hiringpatterns-proxy`     |

Behavioural

| Module                  | Command                                |
|-------------------------|----------------------------------------|
| `chainofresponsibility` | `hiringpatterns-chainofresponsibility` |
| `command`               | `hiringpatterns-command`               |
| `interpreter`           | `hiringpatterns-interpreter`           |
| `iterator`              | `hiringpatterns-iterator`              |
| `mediator`              | `hiringpatterns-mediator`              |
| `memento`               | `hiringpatterns-memento`               |
| `nullobject`            | `hiringpatterns-nullobject`            |
| `observer`              | `hiringpatterns-observer`              |
| `state`                 | `hiringpatterns-state`                 |
| `strategy`              | `hiringpatterns-strategy`              |
| `templatemethod`        | `hiringpatterns-templatemethod`        |
| `visitor`               | `hiringpatterns-visitor`               |

Enterprise

| Module               | Command                             |
|----------------------|-------------------------------------|
| `businessdelegate`   | `hiringpatterns-businessdelegate`   |
| `compositeentity`    | `hiringpatterns-compositeentity`    |
| `dataaccessobject`   | `hiringpatterns-dataaccessobject`   |
| `frontcontroller`    | `hiringpatterns-frontcontroller`    |
| `interceptingfilter` | `hiringpatterns-interceptingfilter` |
| `mvc`                | `hiringpatterns-mvc`                |
| `servicelocator`     | `hiringpatterns-servicelocator`     |
| `transferobject`     | `hiringpatterns-transferobject`     |

## Running a scenario

Each command plays its module's scenario from start to end and prints the
messages. For example:

```
hiringpatterns-chainofresponsibility
hiringpatterns-observer
hiringpatterns-interpreter
```

Every command is backed by a `main()` function in its module, so you can also
start the same scenario from Python:

```python
from hiringpatterns import observer

observer.main()
```

## Using the modules

A factory that hands out candidates by job title. An unknown title gives
`None`:

```python
from hiringpatterns.factory import CandidateFactory

candidate = CandidateFactory().get_candidate("programmer")
print(candidate.about_myself())   # 我是一名程序员
```

A factory of factories, one for candidates and one for interviewers:

```python
from hiringpatterns.abstractfactory import AbstractFactory

interviewers = AbstractFactory().get_factory("interviewer")
print(interviewers.get_interviewer("salesman").about_myself())
```

A chain of handlers that passes a résumé along until one of them deals with
its status. `build_chain()` links `HR`, `Programmer` and `HRD`. If no handler
takes the status, the chain raises `LookupError`:

```python
from hiringpatterns.chainofresponsibility import Resume, Status, build_chain

chain = build_chain()
print(chain.deal(Resume("张三", Status.PASS)))
```

An interpreter that checks whether a pair of values describes a teenager. The
age range runs from 12 inclusive to 18 exclusive:

```python
from hiringpatterns.interpreter import is_teen

is_teen(["Age", 12])   # True
is_teen(["Age", 22])   # False
```

Iterating over a list of résumés:

```python
from hiringpatterns.iterator import get_resumes

for resume in get_resumes():
    print(resume.name)
```

A menu that answers with a null object, not `None`, when a dish is missing:

```python
from hiringpatterns.nullobject import get_menu

menu = get_menu()
menu.get_food("牛肉").is_nil()       # False
menu.get_food("百事可乐").is_nil()   # True
```

A single shared counter that hands out interview numbers:

```python
from hiringpatterns.singleton import get_instance

get_instance().next_id()   # 1, then 2, ...
```

A service locator that caches the controllers it creates:

```python
from hiringpatterns.servicelocator import Locator

locator = Locator()
first = locator.get_controller("controller01")
again = locator.get_controller("controller01")
assert first is again
```

## What it does not do

These are in-memory illustrations of the patterns. The "data access object"
keeps its orders in a plain list and stores nothing on disk. The front
controller, intercepting filter and service locator route request strings
inside Python, and none of them runs a server or listens on a network.