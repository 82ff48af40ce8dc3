"""Lookup of the character encoding used by a server collation."""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Mapping

from .charset import Charset
from .encoding import Encoding

_CHARSET_CODE_LIMIT = 256

_COLLATIONS_BY_ENCODING: dict[Encoding, tuple[Charset, ...]] = {
    Encoding.NONE: (Charset.NONE,),
    Encoding.BIG5: (Charset.BIG5_CHINESE_CI, Charset.BIG5_BIN),
    Encoding.LATIN2: (
        Charset.LATIN2_CZECH_CS,
        Charset.LATIN2_GENERAL_CI,
        Charset.LATIN2_HUNGARIAN_CI,
        Charset.LATIN2_CROATIAN_CI,
        Charset.LATIN2_BIN,
    ),
    Encoding.DEC8: (Charset.DEC8_SWEDISH_CI, Charset.DEC8_BIN),
    Encoding.CP850: (Charset.CP850_GENERAL_CI, Charset.CP850_BIN),
    Encoding.LATIN1: (
        Charset.LATIN1_GERMAN1_CI,
        Charset.LATIN1_SWEDISH_CI,
        Charset.LATIN1_DANISH_CI,
        Charset.LATIN1_GERMAN2_CI,
        Charset.LATIN1_BIN,
        Charset.LATIN1_GENERAL_CI,
        Charset.LATIN1_GENERAL_CS,
        Charset.LATIN1_SPANISH_CI,
    ),
    Encoding.HP8: (Charset.HP8_ENGLISH_CI, Charset.HP8_BIN),
    Encoding.KOI8R: (Charset.KOI8R_GENERAL_CI, Charset.KOI8R_BIN),
    Encoding.SWE7: (Charset.SWE7_SWEDISH_CI, Charset.SWE7_BIN),
    Encoding.ASCII: (Charset.ASCII_GENERAL_CI, Charset.ASCII_BIN),
    Encoding.UJIS: (Charset.UJIS_JAPANESE_CI, Charset.UJIS_BIN),
    Encoding.SJIS: (Charset.SJIS_JAPANESE_CI, Charset.SJIS_BIN),
    Encoding.CP1251: (
        Charset.CP1251_BULGARIAN_CI,
        Charset.CP1251_UKRAINIAN_CI,
        Charset.CP1251_BIN,
        Charset.CP1251_GENERAL_CI,
        Charset.CP1251_GENERAL_CS,
    ),
    Encoding.HEBREW: (Charset.HEBREW_GENERAL_CI, Charset.HEBREW_BIN),
    Encoding.TIS620: (Charset.TIS620_THAI_CI, Charset.TIS620_BIN),
    Encoding.EUCKR: (Charset.EUCKR_KOREAN_CI, Charset.EUCKR_BIN),
    Encoding.LATIN7: (
        Charset.LATIN7_ESTONIAN_CS,
        Charset.LATIN7_GENERAL_CI,
        Charset.LATIN7_GENERAL_CS,
        Charset.LATIN7_BIN,
    ),
    Encoding.KOI8U: (Charset.KOI8U_GENERAL_CI, Charset.KOI8U_BIN),
    Encoding.GB2312: (Charset.GB2312_CHINESE_CI, Charset.GB2312_BIN),
    Encoding.GREEK: (Charset.GREEK_GENERAL_CI, Charset.GREEK_BIN),
    Encoding.CP1250: (
        Charset.CP1250_GENERAL_CI,
        Charset.CP1250_CZECH_CS,
        Charset.CP1250_CROATIAN_CI,
        Charset.CP1250_BIN,
        Charset.CP1250_POLISH_CI,
    ),
    Encoding.GBK: (
        Charset.GBK_CHINESE_CI,
        Charset.GBK_BIN,
        Charset.GB18030_CHINESE_CI,
        Charset.GB18030_BIN_CI,
        Charset.GB18030_UNICODE_520_CI,
    ),
    Encoding.CP1257: (
        Charset.CP1257_LITHUANIAN_CI,
        Charset.CP1257_BIN,
        Charset.CP1257_GENERAL_CI,
    ),
    Encoding.LATIN5: (Charset.LATIN5_TURKISH_CI, Charset.LATIN5_BIN),
    Encoding.ARMSCII8: (Charset.ARMSCII8_GENERAL_CI, Charset.ARMSCII8_BIN),
    Encoding.UTF8: (
        Charset.UTF8_GENERAL_CI,
        Charset.UTF8_BIN,
        Charset.UTF8_UNICODE_CI,
        Charset.UTF8_ICELANDIC_CI,
        Charset.UTF8_LATVIAN_CI,
        Charset.UTF8_ROMANIAN_CI,
        Charset.UTF8_SLOVENIAN_CI,
        Charset.UTF8_POLISH_CI,
        Charset.UTF8_ESTONIAN_CI,
        Charset.UTF8_SPANISH_CI,
        Charset.UTF8_SWEDISH_CI,
        Charset.UTF8_TURKISH_CI,
        Charset.UTF8_CZECH_CI,
        Charset.UTF8_DANISH_CI,
        Charset.UTF8_LITHUANIAN_CI,
        Charset.UTF8_SLOVAK_CI,
        Charset.UTF8_SPANISH2_CI,
        Charset.UTF8_ROMAN_CI,
        Charset.UTF8_PERSIAN_CI,
        Charset.UTF8_ESPERANTO_CI,
        Charset.UTF8_HUNGARIAN_CI,
        Charset.UTF8_SINHALA_CI,
        Charset.UTF8_GENERAL_MYSQL500_CI,
    ),
    Encoding.UCS2: (
        Charset.UCS2_GENERAL_CI,
        Charset.UCS2_BIN,
        Charset.UCS2_UNICODE_CI,
        Charset.UCS2_ICELANDIC_CI,
        Charset.UCS2_LATVIAN_CI,
        Charset.UCS2_ROMANIAN_CI,
        Charset.UCS2_SLOVENIAN_CI,
        Charset.UCS2_POLISH_CI,
        Charset.UCS2_ESTONIAN_CI,
        Charset.UCS2_SPANISH_CI,
        Charset.UCS2_SWEDISH_CI,
        Charset.UCS2_TURKISH_CI,
        Charset.UCS2_CZECH_CI,
        Charset.UCS2_DANISH_CI,
        Charset.UCS2_LITHUANIAN_CI,
        Charset.UCS2_SLOVAK_CI,
        Charset.UCS2_SPANISH2_CI,
        Charset.UCS2_ROMAN_CI,
        Charset.UCS2_PERSIAN_CI,
        Charset.UCS2_ESPERANTO_CI,
        Charset.UCS2_HUNGARIAN_CI,
        Charset.UCS2_SINHALA_CI,
        Charset.UCS2_GENERAL_MYSQL500_CI,
    ),
    Encoding.CP866: (Charset.CP866_GENERAL_CI, Charset.CP866_BIN),
    Encoding.KEYBCS2: (Charset.KEYBCS2_GENERAL_CI, Charset.KEYBCS2_BIN),
    Encoding.MACCE: (Charset.MACCE_GENERAL_CI, Charset.MACCE_BIN),
    Encoding.MACROMAN: (Charset.MACROMAN_GENERAL_CI, Charset.MACROMAN_BIN),
    Encoding.CP852: (Charset.CP852_GENERAL_CI, Charset.CP852_BIN),
    Encoding.UTF8MB4: (
        Charset.UTF8MB4_GENERAL_CI,
        Charset.UTF8MB4_BIN,
        Charset.UTF8MB4_UNICODE_CI,
        Charset.UTF8MB4_ICELANDIC_CI,
        Charset.UTF8MB4_LATVIAN_CI,
        Charset.UTF8MB4_ROMANIAN_CI,
        Charset.UTF8MB4_SLOVENIAN_CI,
        Charset.UTF8MB4_POLISH_CI,
        Charset.UTF8MB4_ESTONIAN_CI,
        Charset.UTF8MB4_SPANISH_CI,
        Charset.UTF8MB4_SWEDISH_CI,
        Charset.UTF8MB4_TURKISH_CI,
        Charset.UTF8MB4_CZECH_CI,
        Charset.UTF8MB4_DANISH_CI,
        Charset.UTF8MB4_LITHUANIAN_CI,
        Charset.UTF8MB4_SLOVAK_CI,
        Charset.UTF8MB4_SPANISH2_CI,
        Charset.UTF8MB4_ROMAN_CI,
        Charset.UTF8MB4_PERSIAN_CI,
        Charset.UTF8MB4_ESPERANTO_CI,
        Charset.UTF8MB4_HUNGARIAN_CI,
        Charset.UTF8MB4_SINHALA_CI,
        Charset.UTF8MB4_GERMAN2_CI,
        Charset.UTF8MB4_CROATIAN_CI,
        Charset.UTF8MB4_UNICODE_520_CI,
        Charset.UTF8MB4_VIETNAMESE_CI,
        Charset.UTF8MB4_0900_AI_CI,
    ),
    Encoding.UTF16: (
        Charset.UTF16_GENERAL_CI,
        Charset.UTF16_BIN,
        Charset.UTF16_UNICODE_CI,
        Charset.UTF16_ICELANDIC_CI,
        Charset.UTF16_LATVIAN_CI,
        Charset.UTF16_ROMANIAN_CI,
        Charset.UTF16_SLOVENIAN_CI,
        Charset.UTF16_POLISH_CI,
        Charset.UTF16_ESTONIAN_CI,
        Charset.UTF16_SPANISH_CI,
        Charset.UTF16_SWEDISH_CI,
        Charset.UTF16_TURKISH_CI,
        Charset.UTF16_CZECH_CI,
        Charset.UTF16_DANISH_CI,
        Charset.UTF16_LITHUANIAN_CI,
        Charset.UTF16_SLOVAK_CI,
        Charset.UTF16_SPANISH2_CI,
        Charset.UTF16_ROMAN_CI,
        Charset.UTF16_PERSIAN_CI,
        Charset.UTF16_ESPERANTO_CI,
        Charset.UTF16_HUNGARIAN_CI,
        Charset.UTF16_SINHALA_CI,
    ),
    Encoding.CP1256: (Charset.CP1256_GENERAL_CI, Charset.CP1256_BIN),
    Encoding.UTF32: (
        Charset.UTF32_GENERAL_CI,
        Charset.UTF32_BIN,
        Charset.UTF32_UNICODE_CI,
        Charset.UTF32_ICELANDIC_CI,
        Charset.UTF32_LATVIAN_CI,
        Charset.UTF32_ROMANIAN_CI,
        Charset.UTF32_SLOVENIAN_CI,
        Charset.UTF32_POLISH_CI,
        Charset.UTF32_ESTONIAN_CI,
        Charset.UTF32_SPANISH_CI,
        Charset.UTF32_SWEDISH_CI,
        Charset.UTF32_TURKISH_CI,
        Charset.UTF32_CZECH_CI,
        Charset.UTF32_DANISH_CI,
        Charset.UTF32_LITHUANIAN_CI,
        Charset.UTF32_SLOVAK_CI,
        Charset.UTF32_SPANISH2_CI,
        Charset.UTF32_ROMAN_CI,
        Charset.UTF32_PERSIAN_CI,
        Charset.UTF32_ESPERANTO_CI,
        Charset.UTF32_HUNGARIAN_CI,
        Charset.UTF32_SINHALA_CI,
    ),
    Encoding.BINARY: (Charset.BINARY,),
    Encoding.GEOSTD8: (Charset.GEOSTD8_GENERAL_CI, Charset.GEOSTD8_BIN),
    Encoding.CP932: (Charset.CP932_JAPANESE_CI, Charset.CP932_BIN),
    Encoding.EUCJPMS: (Charset.EUCJPMS_JAPANESE_CI, Charset.EUCJPMS_BIN),
}

CHARSET_ENCODINGS: Mapping[Charset, Encoding] = MappingProxyType(
    {
        charset: encoding
        for encoding, charsets in _COLLATIONS_BY_ENCODING.items()
        for charset in charsets
    }
)


def encoding_from_charset(charset: Charset | int) -> Encoding:
    """Return the encoding used by a collation code.

    Codes in the collation range that name no known collation map to
    ``Encoding.NONE``; codes outside that range raise ``ValueError``.
    """
    code = operator.index(charset)
    if not 0 <= code < _CHARSET_CODE_LIMIT:
        raise ValueError(f"collation code out of range: {code}")
    try:
        return CHARSET_ENCODINGS[Charset(code)]
    except ValueError:
        return Encoding.NONE