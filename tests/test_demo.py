import io

import pytest

from chainlist.demo import main, run


def _output():
    buf = io.StringIO()
    run(buf)
    return buf.getvalue().split("\n")


def test_first_line_is_mirrored_sequence():
    lines = _output()
    assert lines[0] == "9 8 7 6 5 4 3 2 1 0 0 1 2 3 4 5 6 7 8 9 "


def test_line_count_and_empty_final_show():
    lines = _output()
    # 9 shows, 2 element lines, plus the trailing split remainder
    assert len(lines) == 12
    assert lines[-2] == ""
    assert lines[-1] == ""


def test_each_step_changes_length_by_one():
    lines = _output()
    shows = [line for line in lines[:7]]
    lengths = [len(line.split()) for line in shows]
    assert lengths == [20, 21, 22, 23, 22, 21, 20]


def test_element_lines_report_write():
    lines = _output()
    assert lines[7] == "elem 1: 8"
    assert lines[8] == "elem 1: 0"
    assert lines[9].split()[1] == "0"
    assert lines[9].split()[0] == lines[6].split()[0]


def test_add_at_zero_puts_one_in_front():
    lines = _output()
    assert lines[1].split()[0] == "1"
    assert lines[1].split()[1:] == lines[0].split()


def test_main_prints_same_as_run(capsys):
    buf = io.StringIO()
    run(buf)
    assert main([]) == 0
    assert capsys.readouterr().out == buf.getvalue()


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2