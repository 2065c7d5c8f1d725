from egedemos.inputdemo import InputLog, format_codes, parse_mode


def test_format_codes():
    assert format_codes([104, 105]) == "104, 105"
    assert format_codes([7]) == "7"


def test_parse_mode():
    assert parse_mode(["--utf-8"]) == "utf-8"
    assert parse_mode(["--utf-16"]) == "utf-16"
    assert parse_mode([]) == "ansi"


def test_add_narrow_and_wide():
    narrow = InputLog()
    assert narrow.add([104, 105]) == "hi"
    assert narrow.add([]) is None
    wide = InputLog(wide=True)
    assert wide.add([0x4E2D]) == "\u4e2d"
    assert narrow.lines() == ["hi"]


def test_utf8_bytes_decode():
    log = InputLog(encoding="utf-8")
    assert log.add(list("é".encode("utf-8"))) == "é"


def test_oldest_line_drops():
    log = InputLog()
    for i in range(20):
        log.add([ord("a") + i])
    lines = log.lines()
    assert len(lines) == 18
    assert lines[0] == "c"
    assert lines[-1] == "t"