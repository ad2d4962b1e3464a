import logging

import pytest

from ntt_cli import format_vec, main


def test_utils(capsys):
    assert main(["utils"]) == 0
    out = capsys.readouterr().out
    assert "n=  3, ceil_lg(n)= 2, is_2pow= 0" in out
    assert "n=  4, ceil_lg(n)= 2, is_2pow= 1" in out


def test_primes(capsys):
    assert main(["primes"]) == 0
    out = capsys.readouterr().out
    assert "p    = 40961" in out
    assert "✗ FAIL" not in out


def test_field(capsys):
    assert main(["field", "--width", "16", "--limit", "50"]) == 0
    assert "Checking Z mod 40961" in capsys.readouterr().out


@pytest.mark.parametrize("width", ["16", "32", "64"])
def test_ntt(width, capsys):
    assert main(["ntt", "--width", width, "--num-tests", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("OK!") == 2
    assert "Not OK" not in out


def test_ntt_single_method_random_length(capsys):
    assert main(["ntt", "--width", "32", "--method", "block-major", "--length", "64", "--num-tests", "2"]) == 0
    out = capsys.readouterr().out
    assert "twiddle-major" not in out


def test_convolve(capsys):
    assert main(["convolve", "--width", "64", "--num-tests", "2"]) == 0
    assert "✗ FAIL" not in capsys.readouterr().out


def test_bad_length():
    assert main(["ntt", "--length", "12"]) == 1


def test_length_beyond_table_reports_error(capsys):
    assert main(["ntt", "--width", "16", "--length", str(1 << 14), "--num-tests", "1"]) == 1
    assert "Error" in capsys.readouterr().out


def test_verbose_traces(caplog):
    caplog.set_level(logging.DEBUG)
    assert main(["ntt", "--width", "16", "--num-tests", "1", "-v"]) == 0
    assert "After bit-reversal" in caplog.text


def test_unknown_mode():
    with pytest.raises(SystemExit):
        main(["benchmark"])


def test_format_vec():
    assert format_vec("f", [1, 2, 3]) == "f = [1, 2, 3]"
    assert format_vec("f", [1, 2, 3], 2) == "f = [1, 2,\n      3]"
