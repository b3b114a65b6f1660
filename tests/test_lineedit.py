from dstructs.lineedit import line_edit


def test_worked_example():
    buf = "whli##ilr#e(s#*s)\noutcha@  putchar(*s=#++);"
    assert line_edit(buf) == "while(*s)\n  putchar(*s++);"


def test_plain_text_unchanged():
    assert line_edit("hello world") == "hello world"


def test_erase_on_empty_line_is_ignored():
    assert line_edit("#a") == "a"


def test_at_clears_current_line():
    assert line_edit("abc@d") == "d"


def test_erase_cannot_cross_committed_line():
    assert line_edit("ab\n#c") == "ab\nc"


def test_nul_ends_input():
    assert line_edit("ab\0cd") == "ab"


def test_empty_input():
    assert line_edit("") == ""