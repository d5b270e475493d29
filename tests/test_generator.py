import random

import pytest

from passbench.alphabet import LATIN_LOWER, Alphabet, CharsetSelection
from passbench.builder import build_alphabet
from passbench.generator import RandomPasswordGenerator
from passbench.timer import PerformanceTimer


@pytest.fixture
def generator():
    return RandomPasswordGenerator(build_alphabet(CharsetSelection.all()), random.Random(1234))


@pytest.mark.parametrize("length", [0, 1, 5, 64, 10_000])
def test_length_and_membership(generator, length):
    pwd = generator.generate(length)
    assert len(pwd) == length
    assert all(c in generator.alphabet for c in pwd)


def test_zero_length_is_empty(generator):
    assert generator.generate(0) == ""


def test_negative_length_rejected(generator):
    with pytest.raises(ValueError):
        generator.generate(-1)


def test_same_seed_same_password():
    a = RandomPasswordGenerator(Alphabet(LATIN_LOWER), random.Random(7))
    b = RandomPasswordGenerator(Alphabet(LATIN_LOWER), random.Random(7))
    assert a.generate(100) == b.generate(100)


def test_single_char_pool():
    g = RandomPasswordGenerator(Alphabet("x"), random.Random())
    assert g.generate(10) == "x" * 10


def test_roughly_uniform():
    g = RandomPasswordGenerator(Alphabet("ab"), random.Random(0))
    pwd = g.generate(20_000)
    assert 0.45 < pwd.count("a") / len(pwd) < 0.55


def test_generate_many_keeps_order(generator):
    pairs = list(generator.generate_many([3, 0, 7]))
    assert [length for length, _ in pairs] == [3, 0, 7]
    assert [len(pwd) for _, pwd in pairs] == [3, 0, 7]


def test_timer_noop_non_negative():
    assert PerformanceTimer().measure(lambda: None) >= 0.0


def test_timer_runs_task_once_and_returns_result():
    calls = []
    result, elapsed = PerformanceTimer().timed(lambda: calls.append(1) or "ok")
    assert result == "ok"
    assert calls == [1]
    assert elapsed >= 0.0


def test_timer_reports_milliseconds():
    ticks = iter([1.0, 1.25])
    assert PerformanceTimer(clock=lambda: next(ticks)).measure(lambda: None) == pytest.approx(250.0)


def test_timer_propagates_errors():
    def boom():
        raise RuntimeError("x")

    with pytest.raises(RuntimeError):
        PerformanceTimer().measure(boom)
