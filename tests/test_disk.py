import io

import pytest

from oslabsim.disk import SeekResult, c_scan, main

REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]


def test_worked_example():
    result = c_scan(REQUESTS, 53, 200)
    assert result.seek_time == 382
    assert result.sequence == (65, 67, 98, 122, 124, 183, 14, 37)


def test_sequence_is_permutation():
    result = c_scan(REQUESTS, 53, 200)
    assert sorted(result.sequence) == sorted(REQUESTS)


def test_upper_part_comes_first_and_ascends():
    result = c_scan(REQUESTS, 100, 200)
    above = [r for r in result.sequence if r > 100]
    below = [r for r in result.sequence if r <= 100]
    assert list(result.sequence) == above + below
    assert above == sorted(above)
    assert below == sorted(below)


def test_request_at_head_served_after_wrap():
    result = c_scan([50, 60], 50, 100)
    assert result.sequence == (60, 50)


def test_out_of_range_request_rejected():
    with pytest.raises(ValueError, match="Process cannot complete"):
        c_scan([10, 200], 5, 200)


def test_no_requests():
    assert c_scan([], 10, 200) == SeekResult(0, ())


def test_str_format():
    text = str(c_scan([65, 67], 53, 200))
    assert text.splitlines()[1] == "Seek Sequence : 65->67->"
    assert text.startswith("Seektime =")


def test_main_reads_stdin(monkeypatch, capsys):
    data = "200\n8\n98 183 37 122 14 124 65 67\n53\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    assert "Seektime =382" in capsys.readouterr().out


def test_main_rejects_out_of_range(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("100\n1\n150\n"))
    assert main([]) == 1
    assert "Process cannot complete" in capsys.readouterr().out