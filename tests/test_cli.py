import pytest
from zoo_client import cli
from zoo_client.fakes import ScriptedTransport, failure, ok

class FakeFactory:
    def __init__(self, kind, connect_timeout, read_timeout):
        self.kind = kind
        self.transport = ScriptedTransport(
            {
                "http://zoo.test/monkeys": ok("Hi there, I love monkeys!"),
                "http://zoo.test/dogs": ok("Hi there, I love dogs!"),
                "http://zoo.test/cats": failure("connection error"),
            },
            default=ok("Not found", status_code=404),
        )
        self.transport.close = lambda: setattr(self.transport, "closed", True)
        FakeFactory.last = self

    def create(self):
        return self.transport

@pytest.fixture
def fake_factory(monkeypatch):
    monkeypatch.setattr(cli, "HttpTransportFactory", FakeFactory)
    return FakeFactory

def test_main_prints_messages(fake_factory, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--base-url", "http://zoo.test", "--transport", "requests", "monkeys", "elephants"])
    assert exc.value.code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["monkeys: Hi there, I love monkeys!", "elephants: Not found"]
    assert fake_factory.last.kind == "requests"
    assert fake_factory.last.transport.closed

def test_main_exits_1_when_nothing_came_back(fake_factory, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--base-url", "http://zoo.test", "cats"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == "cats: \n"
    assert "[warn]" in captured.err

def test_main_exits_2_on_unknown_transport_from_env(monkeypatch, capsys):
    monkeypatch.setenv("ZOO_TRANSPORT", "bogus")
    with pytest.raises(SystemExit) as exc:
        cli.main(["dogs"])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "unknown transport kind 'bogus'" in captured.err
    assert captured.out == ""

def test_run_tolerates_transport_without_close(monkeypatch, capsys):
    class NoCloseFactory:
        def __init__(self, *args):
            self.transport = ScriptedTransport(default=ok("hi"))

        def create(self):
            return self.transport

    monkeypatch.setattr(cli, "HttpTransportFactory", NoCloseFactory)
    assert cli.run(cli.parse_args(["dogs"])) == 0
    assert capsys.readouterr().out == "dogs: hi\n"
