import io

import pytest

from contest800.coins import can_pay, main, run


@pytest.mark.parametrize("n,k", [(2, 3), (4, 7), (100, 1), (8, 8)])
def test_even_amount_always_payable(n, k):
    assert can_pay(n, k) is True


@pytest.mark.parametrize("n,k", [(5, 3), (7, 7), (9, 1)])
def test_odd_amount_with_odd_coin_not_exceeding(n, k):
    assert can_pay(n, k) is True


@pytest.mark.parametrize("n,k", [(5, 4), (7, 2)])
def test_odd_amount_with_even_coin(n, k):
    assert can_pay(n, k) is False


def test_odd_amount_below_coin():
    assert can_pay(3, 5) is False


def test_run_formats_answers():
    assert run("4\n5 3\n6 1\n7 4\n3 5\n") == "YES\nYES\nNO\nNO\n"


def test_run_zero_cases():
    assert run("0\n") == ""


def test_run_truncated_input_raises():
    with pytest.raises(ValueError):
        run("2\n5 3\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n9 3\n9 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "YES\nNO\n"