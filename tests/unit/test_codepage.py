from gurs_housenumbers.common.codepage import decode_windows1250, encode_windows1250


def test_decode_slovenian_letters():
    assert decode_windows1250(b"\x8amartno") == "Šmartno"
    assert decode_windows1250(b"\xc8opova ulica") == "Čopova ulica"


def test_encode_is_inverse_of_decode():
    assert encode_windows1250("Žalec") == b"\x8ealec"
    assert decode_windows1250(encode_windows1250("Kidričeva")) == "Kidričeva"


def test_undefined_bytes_are_replaced_not_raised():
    assert decode_windows1250(b"a\x81b") == "a�b"


def test_unencodable_characters_are_replaced():
    assert encode_windows1250("a€b✓") == b"a\x80b?"
