"""Character encodings that server collations map onto."""

from __future__ import annotations

from enum import IntEnum


class Encoding(IntEnum):
    """A character encoding shared by one or more collations."""

    NONE = 0
    BIG5 = 1
    LATIN2 = 2
    DEC8 = 3
    CP850 = 4
    LATIN1 = 5
    HP8 = 6
    KOI8R = 7
    SWE7 = 8
    ASCII = 9
    UJIS = 10
    SJIS = 11
    CP1251 = 12
    HEBREW = 13
    TIS620 = 14
    EUCKR = 15
    LATIN7 = 16
    KOI8U = 17
    GB2312 = 18
    GREEK = 19
    CP1250 = 20
    GBK = 21
    CP1257 = 22
    LATIN5 = 23
    ARMSCII8 = 24
    UTF8 = 25
    UCS2 = 26
    CP866 = 27
    KEYBCS2 = 28
    MACCE = 29
    MACROMAN = 30
    CP852 = 31
    UTF8MB4 = 32
    UTF16 = 33
    CP1256 = 34
    UTF32 = 35
    BINARY = 36
    GEOSTD8 = 37
    CP932 = 38
    EUCJPMS = 39