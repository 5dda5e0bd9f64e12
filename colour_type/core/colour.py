"""The Colour value — a packed 24-bit RGB integer.

Red lives in bits 16-23, green in 8-15, blue in 0-7. The packed integer is
the storage encoding (see colour_type.core.column), so it must stay
numerically identical to what existing rows hold.

Parsing accepts hex text (with or without '#', 3- or 6-digit), channel
sequences, other Colour instances, palette colour records (anything with
r/g/b attributes) and plain numbers. Numbers are always clamped, never
rejected. Only strict text parsing raises (ParseError).

Example:
    >>> Colour.parse('#abc').to_html()
    '#aabbcc'
    >>> Colour.parse([255, 0, 0]).to_hex()
    'ff0000'
    >>> Colour(0xFFFFFF).negate().to_decimal()
    0
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from colour_type.core.types import HSL, RGB

MIN_VALUE = 0
MAX_VALUE = 0xFFFFFF

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_INT_PREFIX = re.compile(r'\s*([+-]?)(\d+)')
# Longest decimal magnitude worth converting; anything longer is clamped anyway
_MAX_DIGITS = len(str(MAX_VALUE))


class ParseError(ValueError):
    """Raised by strict parsing when text is not a hexadecimal colour."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f'not a hexadecimal colour: {text!r}')


def _to_int(value: Any) -> int:
    """Best-effort integer coercion. Non-numeric input becomes 0."""
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        m = _INT_PREFIX.match(value)
        if not m:
            return 0
        sign, digits = m.groups()
        digits = digits.lstrip('0') or '0'
        if len(digits) > _MAX_DIGITS:
            return MIN_VALUE - 1 if sign == '-' else MAX_VALUE + 1
        return int(sign + digits)
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _clamp(value: int) -> int:
    return max(min(value, MAX_VALUE), MIN_VALUE)


def _channels(value: Any) -> list[Any] | None:
    """First three items of a sized, indexable value (list, tuple, ndarray).

    Returns None for values that are not channel sequences.
    """
    if isinstance(value, Mapping) or not hasattr(value, '__getitem__'):
        return None
    try:
        return [value[i] for i in range(min(len(value), 3))]
    except (TypeError, KeyError, IndexError):
        return None


def _decode(raw: bytes, strict: bool) -> str:
    """ASCII text of raw bytes. Strict mode rejects non-ASCII bytes."""
    if not strict:
        return raw.decode('ascii', errors='ignore')
    try:
        return raw.decode('ascii')
    except UnicodeDecodeError:
        raise ParseError(raw.decode('ascii', errors='replace')) from None


def _hex_to_int(text: str, strict: bool = False) -> int:
    """Read a hex colour code ('#' optional, 3-digit shorthand expanded).

    Surrounding whitespace is trimmed before the shorthand check, so ' #fff'
    reads as 0xffffff (the legacy decoder saw four characters there and
    produced 0xfff).
    """
    digits = text.replace('#', '').strip()
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)

    if strict:
        if not digits or any(ch not in _HEX_DIGITS for ch in digits):
            raise ParseError(text)
    else:
        # Lenient: skip anything that is not a hex digit
        digits = ''.join(ch for ch in digits if ch in _HEX_DIGITS)

    return int(digits, 16) if digits else 0


class Colour:
    """A single RGB colour packed into ``value`` (0 to 0xFFFFFF).

    ``value`` is read-only; only negate() and monochrome() change it.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any = 0) -> None:
        self._value = _clamp(_to_int(value))

    @property
    def value(self) -> int:
        return self._value

    # -- factories -----------------------------------------------------------

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Colour:
        """Pack three 8-bit channels.

        Channels are not clamped: a channel outside 0-255 carries into the
        next one up, the same way stored values were always produced.
        """
        return cls((((r << 8) + g) << 8) + b)

    @classmethod
    def parse(cls, value: Any, strict: bool = False) -> Colour:
        """Build a Colour from any supported representation.

        With ``strict=True`` malformed hex text raises ParseError instead of
        skipping the bad characters.
        """
        if isinstance(value, Colour):
            return cls(value.value)
        if isinstance(value, str):
            return cls(_hex_to_int(value, strict=strict))
        if isinstance(value, (bytes, bytearray)):
            return cls(_hex_to_int(_decode(bytes(value), strict), strict=strict))
        channels = _channels(value)
        if channels is not None:
            if len(channels) == 3:
                return cls.from_rgb(*(_to_int(c) for c in channels))
            return cls(0)
        if all(hasattr(value, attr) for attr in ('r', 'g', 'b')):
            return cls.from_rgb(_to_int(value.r), _to_int(value.g), _to_int(value.b))
        return cls(_to_int(value))

    @classmethod
    def from_palette(cls, colours: Iterable[Any], hex: bool = False) -> list[Colour] | list[str]:
        """Map palette output (RGB triples or r/g/b records) to Colours.

        With ``hex=True`` returns the HTML strings instead.
        """
        result = [cls.parse(c) for c in colours]
        if hex:
            return [c.to_html() for c in result]
        return result

    def copy(self) -> Colour:
        return type(self)(self.value)

    # -- conversions ---------------------------------------------------------

    def to_hex(self) -> str:
        return format(self.value, 'x')

    def to_html(self) -> str:
        return '#' + self.to_hex().rjust(6, '0')

    def to_decimal(self) -> int:
        return int(self.value)

    def to_rgb(self) -> RGB:
        return RGB(self.value >> 16 & 0xFF, self.value >> 8 & 0xFF, self.value & 0xFF)

    def to_hsl(self) -> HSL:
        """Hue in degrees, saturation and lightness in [0, 1].

        When two channels tie for the maximum, green wins over blue and
        blue over red.
        """
        r, g, b = (c / 255 for c in self.to_rgb())
        high = max(r, g, b)
        low = min(r, g, b)
        h = 0.0
        s = 0.0
        lightness = (high + low) / 2
        d = high - low

        if d != 0:
            s = d / (1 - abs(2 * lightness - 1))
            if high == g:
                h = 60 * ((b - r) / d + 2)
            elif high == b:
                h = 60 * ((r - g) / d + 4)
            else:
                h = 60 * math.fmod((g - b) / d, 6)
                if b > g:
                    h += 360

        return HSL(h, s, lightness)

    def to_json(self) -> str:
        return self.to_html()

    # -- transforms (in place) -----------------------------------------------

    def negate(self) -> Colour:
        """Invert every channel. Returns self."""
        r, g, b = self.to_rgb()
        self._value = (((255 - r) << 8) + (255 - g) << 8) + (255 - b)
        return self

    def monochrome(self) -> Colour:
        """Snap to near-black (0x010101) or white depending on darkness. Returns self."""
        r, g, b = self.to_rgb()
        inverted = ((255 - r) + (255 - g) + (255 - b)) / 3
        level = 1 if inverted > 128 else 255
        self._value = ((level << 8) + level << 8) + level
        return self

    # -- dunder --------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        return f'<Colour value={self.to_html()}>'

    def __int__(self) -> int:
        return self.to_decimal()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Colour):
            return self.value == other.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


Color = Colour


def json_default(obj: Any) -> str:
    """``json.dumps(default=...)`` hook: Colours serialise as '#rrggbb'."""
    if isinstance(obj, Colour):
        return obj.to_json()
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')
