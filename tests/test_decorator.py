from hiringpatterns.decorator import BaseInterview, ProgrammerInterview, main


def test_base_rounds():
    base = BaseInterview()
    assert base.first_interview() == "这是第一轮面试"
    assert base.last_interview() == "这是最后一轮面试"


def test_programmer_keeps_base_rounds():
    programmer = ProgrammerInterview()
    base = BaseInterview()
    assert programmer.first_interview() == base.first_interview()
    assert programmer.last_interview() == base.last_interview()


def test_programmer_adds_second_round():
    assert ProgrammerInterview().second_interview() == "这是第二轮面试"


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "这是第一轮面试",
        "这是第二轮面试",
        "这是最后一轮面试",
    ]