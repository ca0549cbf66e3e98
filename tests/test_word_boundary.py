from citemark.annotate import find_word_boundary


def test_mid_word_scans_to_punctuation():
    assert find_word_boundary("The cat sat.", 9) == 11


def test_already_on_space_returns_same_position():
    assert find_word_boundary("The cat sat.", 7) == 7


def test_already_on_punctuation_returns_same_position():
    assert find_word_boundary("The cat sat.", 11) == 11


def test_scan_runs_to_end_of_text():
    assert find_word_boundary("Hello", 2) == 5


def test_end_of_text_position_is_returned_unchanged():
    assert find_word_boundary("Hello", 5) == 5


def test_tabs_and_newlines_count_as_boundaries():
    assert find_word_boundary("a\tb", 0) == 1
    assert find_word_boundary("line\nnext", 1) == 4


def test_each_punctuation_mark_stops_the_scan():
    for mark in ".,!?;:":
        assert find_word_boundary(f"word{mark}rest", 1) == 4


def test_whitespace_set_follows_ecmascript():
    assert find_word_boundary("a\ufeffb", 0) == 1
    assert find_word_boundary("a\u00a0b", 0) == 1
    assert find_word_boundary("a\u3000b", 0) == 1
    assert find_word_boundary("a\x1cb", 0) == 3
    assert find_word_boundary("a\x85b", 0) == 3
