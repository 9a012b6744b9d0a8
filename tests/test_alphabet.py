import logging

from wordcodec import ALPHA_END, ALPHA_START, AlphanumericTable


def test_table_bands():
    table = AlphanumericTable()

    assert len(table) == 62
    assert (table.code("A"), table.code("Z")) == (1, 26)
    assert (table.code("a"), table.code("z")) == (27, 52)
    assert (table.code("0"), table.code("9")) == (53, 62)


def test_table_is_a_bijection():
    table = AlphanumericTable()

    codes = [code for _, code in table.items()]
    assert codes == list(range(1, 63))
    for char, code in table.items():
        assert table.char(code) == char


def test_lookups_outside_the_table():
    table = AlphanumericTable()

    assert table.code("!") is None
    assert table.code("é") is None
    assert table.char(0) is None
    assert table.char(63) is None
    assert table.char(ALPHA_START) is None
    assert table.char(ALPHA_END) is None


def test_encode_word_skips_and_logs_unsupported_characters(caplog):
    table = AlphanumericTable()

    with caplog.at_level(logging.WARNING, logger="wordcodec.alphabet"):
        tokens = table.encode_word("a-1")

    assert tokens == [ALPHA_START, 27, 54, ALPHA_END]
    assert "'-'" in caplog.text


def test_encode_word_without_supported_characters():
    table = AlphanumericTable()

    assert table.encode_word("?!") == [ALPHA_START, ALPHA_END]
