import pytest

from hiringpatterns.businessdelegate import (
    Client,
    Delegate,
    HRService,
    ITService,
    LookUp,
    main,
)


def test_lookup_finds_it_service():
    service = LookUp().get_service("it")
    assert isinstance(service, ITService)
    assert service.do_processing() == "我们提供 IT 相关服务"


def test_lookup_finds_hr_service():
    service = LookUp().get_service("hr")
    assert isinstance(service, HRService)
    assert service.do_processing() == "我们负责提供人力薪资相关服务"


def test_lookup_unknown_is_none():
    assert LookUp().get_service("finance") is None


def test_client_uses_delegate_service_type():
    delegate = Delegate(service_type="it")
    client = Client(delegate)
    assert client.do_task() == ITService().do_processing()
    delegate.service_type = "hr"
    assert client.do_task() == HRService().do_processing()


def test_delegate_unknown_type_raises():
    with pytest.raises(LookupError):
        Delegate(service_type="nothing").do_task()


def test_main_prints_both_services(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [ITService().do_processing(), HRService().do_processing()]