"""
Тесты для Text Stream — форматирование и разбор в режимах DEC/OCT/HEX

Покрывает:
- StreamFormat (immutability, enum валидация, префиксы)
- Форматирование с show_base и без
- Чтение лексем, разделённых пробельными символами
- Разбор с префиксом и без префикса основания
"""

import io

import pytest
from pydantic import ValidationError

from src.core.math import BigInteger, InvalidDigitError
from src.core.streams import (
    NumericBase,
    StreamFormat,
    format_for_stream,
    parse_token,
    read_big_integer,
    read_token,
    write_big_integer,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def hex_fmt() -> StreamFormat:
    return StreamFormat(base=NumericBase.HEX)


@pytest.fixture
def oct_fmt() -> StreamFormat:
    return StreamFormat(base=NumericBase.OCT)


# =============================================================================
# STREAM FORMAT
# =============================================================================


class TestStreamFormat:
    """Тесты модели StreamFormat"""

    def test_defaults(self):
        fmt = StreamFormat()
        assert fmt.base is NumericBase.DEC
        assert fmt.show_base is False
        assert fmt.prefix == ""

    def test_base_from_int(self):
        """Основание принимается числом и приводится к enum"""
        assert StreamFormat(base=16).base is NumericBase.HEX
        assert StreamFormat(base=8).prefix == "0"

    def test_unsupported_base_rejected(self):
        with pytest.raises(ValidationError):
            StreamFormat(base=2)

    def test_frozen(self, hex_fmt):
        with pytest.raises(ValidationError):
            hex_fmt.show_base = True

    def test_model_copy_switches_mode(self, hex_fmt):
        shown = hex_fmt.model_copy(update={"show_base": True})
        assert shown.show_base is True
        assert hex_fmt.show_base is False


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


class TestFormatting:
    """Тесты форматирования"""

    def test_decimal_default(self):
        assert format_for_stream(BigInteger(-123)) == "-123"

    def test_decimal_never_prefixed(self):
        fmt = StreamFormat(show_base=True)
        assert format_for_stream(BigInteger(10), fmt) == "10"

    def test_hex_without_show_base(self, hex_fmt):
        assert format_for_stream(BigInteger(-255), hex_fmt) == "-ff"

    def test_sign_before_prefix(self, hex_fmt, oct_fmt):
        show_hex = hex_fmt.model_copy(update={"show_base": True})
        show_oct = oct_fmt.model_copy(update={"show_base": True})
        assert format_for_stream(BigInteger(-255), show_hex) == "-0xff"
        assert format_for_stream(BigInteger(-255), show_oct) == "-0377"
        assert format_for_stream(BigInteger(255), show_oct) == "0377"

    def test_write_to_stream(self, hex_fmt):
        stream = io.StringIO()
        write_big_integer(stream, BigInteger(4095), hex_fmt)
        stream.write(" ")
        write_big_integer(stream, BigInteger(-1))
        assert stream.getvalue() == "fff -1"


# =============================================================================
# РАЗБОР
# =============================================================================


class TestReadToken:
    """Тесты чтения лексем"""

    def test_skips_whitespace(self):
        stream = io.StringIO("  \n\t 123   -45\n")
        assert read_token(stream) == "123"
        assert read_token(stream) == "-45"

    def test_eof(self):
        stream = io.StringIO("   ")
        with pytest.raises(EOFError):
            read_token(stream)


class TestParse:
    """Тесты разбора лексем"""

    def test_decimal(self):
        assert parse_token("-12345678901234567890") == BigInteger.from_string("-12345678901234567890")

    def test_hex_with_prefix(self, hex_fmt):
        assert parse_token("0xff", hex_fmt) == 255
        assert parse_token("-0XFF", hex_fmt) == -255

    def test_hex_without_prefix(self, hex_fmt):
        """Голые цифры в режиме HEX не теряют символов"""
        assert parse_token("ff", hex_fmt) == 255
        assert parse_token("-10", hex_fmt) == -16

    def test_oct_with_and_without_prefix(self, oct_fmt):
        assert parse_token("0377", oct_fmt) == 255
        assert parse_token("377", oct_fmt) == 255
        assert parse_token("-017", oct_fmt) == -15

    def test_oct_single_zero(self, oct_fmt):
        assert parse_token("0", oct_fmt).sign() == 0

    def test_invalid_digit(self, oct_fmt):
        with pytest.raises(InvalidDigitError):
            parse_token("0389", oct_fmt)

    def test_read_sequence_from_stream(self, hex_fmt):
        stream = io.StringIO("-0xff 10\n0x0")
        assert read_big_integer(stream, hex_fmt) == -255
        assert read_big_integer(stream, hex_fmt) == 16
        assert read_big_integer(stream, hex_fmt).sign() == 0
        with pytest.raises(EOFError):
            read_big_integer(stream, hex_fmt)

    def test_write_then_read(self, oct_fmt):
        fmt = oct_fmt.model_copy(update={"show_base": True})
        value = BigInteger.from_string("-777777777777777777777777", 8)
        stream = io.StringIO()
        write_big_integer(stream, value, fmt)
        stream.seek(0)
        assert read_big_integer(stream, fmt) == value
