"""
Label mapping - classifier label to catalog category.

This is a placeholder hash, not a trained mapping. It must stay bit-for-bit
stable: the accumulation is ``h = h * 31 + code`` over UTF-16 code units,
wrapped to a signed 32-bit integer after every step, then
``abs(h) % len(catalog)``.
"""

import struct
from collections.abc import Sequence

from ..utils.constants import BREED_CATALOG

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _utf16_code_units(text: str) -> tuple[int, ...]:
    """Code units as a browser's charCodeAt would report them."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def label_hash(label: str) -> int:
    """Signed 32-bit multiply-by-31 string hash."""
    h = 0
    for code in _utf16_code_units(label):
        h = (h * 31 + code) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


class LabelMapper:
    """Maps arbitrary classifier labels onto a fixed, ordered catalog."""

    def __init__(self, catalog: Sequence[str] = BREED_CATALOG):
        if not catalog:
            raise ValueError("Category catalog must not be empty")
        if len(set(catalog)) != len(catalog):
            raise ValueError("Category catalog must not contain duplicates")
        self._catalog = tuple(catalog)

    @property
    def catalog(self) -> tuple[str, ...]:
        return self._catalog

    @property
    def default(self) -> str:
        """Category returned for empty or missing labels."""
        return self._catalog[0]

    def map(self, label: str | None) -> str:
        if not label:
            return self.default
        return self._catalog[abs(label_hash(label)) % len(self._catalog)]
