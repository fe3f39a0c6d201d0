"""Enumerations for jpencoding."""

import enum


class EncodingTag(enum.Enum):
    """Encodings that the detector can report.

    ``UNDETECTED`` means no candidate grammar fit the data within tolerance;
    callers should treat it as binary or unknown content.
    """

    ASCII = "ascii"
    JIS = "jis"
    SHIFT_JIS = "shift_jis"
    EUC = "euc"
    UTF8 = "utf8"
    UTF16LE = "utf16le"
    UTF16BE = "utf16be"
    UTF32 = "utf32"
    UNDETECTED = "undetected"

    @property
    def codec(self) -> str | None:
        """Python codec name usable with :meth:`bytes.decode`."""
        return _CODECS.get(self)

    @property
    def charset(self) -> str | None:
        """IANA charset name, as reported by the command-line tool."""
        return _CHARSETS.get(self)

    @property
    def code_page(self) -> int | None:
        """Windows code page identifier."""
        return _CODE_PAGES.get(self)

    @property
    def is_detected(self) -> bool:
        return self is not EncodingTag.UNDETECTED


# CP932 is the Windows superset of Shift_JIS and the codec the Shift-JIS
# grammar below actually accepts (lead bytes up to 0xFC).
_CODECS: dict[EncodingTag, str] = {
    EncodingTag.ASCII: "ascii",
    EncodingTag.JIS: "iso-2022-jp",
    EncodingTag.SHIFT_JIS: "cp932",
    EncodingTag.EUC: "euc-jp",
    EncodingTag.UTF8: "utf-8",
    EncodingTag.UTF16LE: "utf-16-le",
    EncodingTag.UTF16BE: "utf-16-be",
    EncodingTag.UTF32: "utf-32",
}

_CHARSETS: dict[EncodingTag, str] = {
    EncodingTag.ASCII: "us-ascii",
    EncodingTag.JIS: "iso-2022-jp",
    EncodingTag.SHIFT_JIS: "shift_jis",
    EncodingTag.EUC: "euc-jp",
    EncodingTag.UTF8: "utf-8",
    EncodingTag.UTF16LE: "utf-16le",
    EncodingTag.UTF16BE: "utf-16be",
    EncodingTag.UTF32: "utf-32",
}

_CODE_PAGES: dict[EncodingTag, int] = {
    EncodingTag.ASCII: 20127,
    EncodingTag.JIS: 50220,
    EncodingTag.SHIFT_JIS: 932,
    EncodingTag.EUC: 51932,
    EncodingTag.UTF8: 65001,
    EncodingTag.UTF16LE: 1200,
    EncodingTag.UTF16BE: 1201,
    EncodingTag.UTF32: 12000,
}


class DetectionMethod(enum.Enum):
    """The pipeline stage that produced a result."""

    EMPTY = "empty"
    BOM = "bom"
    UTF16 = "utf16"
    ESCAPE = "escape"
    ASCII = "ascii"
    SCORING = "scoring"
