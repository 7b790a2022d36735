import pytest

from hiringpatterns.filtering import Candidate, Cheap, Young, main


@pytest.fixture
def candidates():
    return [
        Candidate(age=25, salary=8000, experience=5),
        Candidate(age=45, salary=8000, experience=5),
        Candidate(age=25, salary=3000, experience=5),
        Candidate(age=25, salary=10000, experience=5),
        Candidate(age=50, salary=5000, experience=5),
        Candidate(age=25, salary=5000, experience=5),
    ]


def test_young_keeps_only_young(candidates):
    result = Young().filter(candidates)
    assert all(c.age <= 35 for c in result)
    assert [c for c in candidates if c not in result] == [candidates[1], candidates[4]]


def test_cheap_keeps_only_cheap(candidates):
    result = Cheap().filter(candidates)
    assert result == [candidates[2], candidates[4], candidates[5]]


def test_filters_keep_order_and_are_subsets(candidates):
    for chosen in (Young().filter(candidates), Cheap().filter(candidates)):
        positions = [candidates.index(c) for c in chosen]
        assert positions == sorted(positions)


def test_young_boundary():
    at_limit = Candidate(age=35)
    over = Candidate(age=36)
    assert Young().filter([at_limit, over]) == [at_limit]


def test_cheap_boundary():
    at_limit = Candidate(salary=5000)
    over = Candidate(salary=5001)
    assert Cheap().filter([over, at_limit]) == [at_limit]


def test_empty_input():
    assert Young().filter([]) == []
    assert Cheap().filter(iter([])) == []


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "young:"
    assert lines[2] == "cheap:"
    assert lines[1].count("Candidate(") == 4
    assert lines[3].count("Candidate(") == 3