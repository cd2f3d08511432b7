from pwi.accumulator import Accumulator, collapse_blank_lines


def test_join_in_order():
    acc = Accumulator(cleanup_newlines=False)
    for line in ["a", "", "b"]:
        acc.add_line(line)
    assert len(acc) == 3
    assert acc.finalize() == "a\n\nb"


def test_collapse_runs():
    acc = Accumulator()
    for line in ["a", "", "", "", "b", "", "c"]:
        acc.add_line(line)
    assert acc.finalize() == "a\n\nb\n\nc"


def test_no_collapse_when_disabled():
    acc = Accumulator(cleanup_newlines=False)
    for line in ["a", "", "", "b"]:
        acc.add_line(line)
    assert acc.finalize() == "a\n\n\nb"


def test_collapse_is_idempotent():
    text = "x\n\n\n\ny\n\n\nz\n"
    once = collapse_blank_lines(text)
    assert once == "x\n\ny\n\nz\n"
    assert collapse_blank_lines(once) == once


def test_single_newlines_untouched():
    assert collapse_blank_lines("a\nb\nc") == "a\nb\nc"


def test_empty_accumulator():
    assert Accumulator().finalize() == ""
