import io
import sys
import time
from unittest import mock

import pytest

from creational import demo
from creational.singleton import SingletonRegistry


def test_singleton_demo(capsys):
    # Run the test many times to increase odds of running into race condition
    for _ in range(50):
        res = demo.singleton_demo(SingletonRegistry())
        assert len(res) == 2
        assert res[0] == res[1]
        assert res[0] in ("FOO", "BAR")

    out = capsys.readouterr().out
    assert "RESULT:" in out


def test_singleton_demo_output(capsys):
    res = demo.singleton_demo(SingletonRegistry())
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == [res[0], res[0]]


class YieldingStdout(io.StringIO):
    """Gives up the GIL on every write, like a terminal or pipe does."""

    def write(self, s):
        n = super().write(s)
        time.sleep(0)
        return n


def test_singleton_demo_lines_not_interleaved():
    old = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        for _ in range(300):
            out = YieldingStdout()
            with mock.patch.object(sys, "stdout", out):
                res = demo.singleton_demo(SingletonRegistry())
            assert out.getvalue().splitlines()[-2:] == [res[0], res[0]]
    finally:
        sys.setswitchinterval(old)


def test_naive_singleton_demo(capsys):
    assert demo.naive_singleton_demo()
    out = capsys.readouterr().out
    assert "Singleton works, both variables contain the same instance." in out


def test_naive_race_demo(capsys):
    assert demo.naive_race_demo(threads=3, delay=0.05) == 3
    assert "3 instance(s) created" in capsys.readouterr().out


def test_factory_method_demo(capsys):
    demo.factory_method_demo()
    out = capsys.readouterr().out
    assert "App: Launched with the ConcreteCreator1." in out
    assert "{Result of ConcreteProduct2}" in out
    assert out.count("(50, 45)") == 3


def test_prototype_demo(capsys):
    demo.prototype_demo()
    lines = [ln.strip() for ln in capsys.readouterr().out.splitlines()]
    # john and jane share the id after the shallow copy
    assert lines[-4:] == [
        "Name: John Smith, Age: 18, BirthDate: 05/25/00",
        "ID#: 2",
        "Name: Jane Smith, Age: 28, BirthDate: 06/26/05",
        "ID#: 2",
    ]


@pytest.fixture
def no_log():
    with mock.patch.object(demo, "init_log") as init:
        yield init


@pytest.mark.parametrize("name, func", [
    ("singleton", "singleton_demo"),
    ("factory", "factory_method_demo"),
    ("prototype", "prototype_demo"),
])
def test_main_runs_one(no_log, name, func):
    with mock.patch.object(demo, func) as run:
        demo.main([name, "--log-level", "debug"])
    run.assert_called_once()
    no_log.assert_called_once_with("DEBUG")
    no_log.return_value.stop.assert_called_once()


def test_main_all(no_log):
    with mock.patch.multiple(demo, singleton_demo=mock.DEFAULT, naive_singleton_demo=mock.DEFAULT,
                             naive_race_demo=mock.DEFAULT, factory_method_demo=mock.DEFAULT,
                             prototype_demo=mock.DEFAULT) as runs:
        demo.main([])
    for run in runs.values():
        run.assert_called_once()


def test_main_bad_demo(no_log):
    with pytest.raises(SystemExit) as exc:
        demo.main(["builder"])
    assert exc.value.code == 2
