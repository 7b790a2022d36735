import pytest

from hiringpatterns.iterator import Resume, ResumeIterator, get_resumes, main


def test_get_resumes_names_in_order():
    assert [r.name for r in get_resumes()] == ["张三", "李四"]


def test_iterator_is_exhausted_after_one_pass():
    it = get_resumes()
    assert len(list(it)) == 2
    assert list(it) == []


def test_next_raises_stop_iteration_when_exhausted():
    it = ResumeIterator([Resume("a")])
    assert next(it).name == "a"
    assert next(it, "done") == "done"
    with pytest.raises(StopIteration):
        next(it)


def test_iter_returns_self():
    it = ResumeIterator([Resume("a")])
    assert iter(it) is it


def test_preserves_given_order():
    resumes = [Resume(str(n)) for n in range(5)]
    assert list(ResumeIterator(resumes)) == resumes


def test_main_prints_names(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["张三", "李四"]