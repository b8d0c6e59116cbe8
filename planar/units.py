"""Unit conversion table.

Ratios are kept as an explicit symmetric table: every entry for
(a, b) has a matching 1/ratio entry for (b, a). Base ratios against
millimeters are loaded on first use; other pairs are derived through the
base unit when first asked for and cached. Entries are only ever added.
"""
import logging
import threading
from .constants import BASE_UNIT, BASE_CONVERSIONS
from .types import UnitType, UnknownUnit

log = logging.getLogger(__name__)


def _unit(tag) -> UnitType:
    try:
        return UnitType(tag)
    except ValueError:
        raise UnknownUnit(f"Unknown unit type: {tag!r}") from None


class UnitConversionTable:
    """Lazily filled table of pairwise conversion ratios."""

    def __init__(self, base: UnitType = BASE_UNIT,
                 base_conversions: dict[UnitType, float] | None = None):
        self.base = base
        self._base_conversions = dict(BASE_CONVERSIONS if base_conversions is None
                                      else base_conversions)
        self._table: dict[UnitType, dict[UnitType, float]] | None = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._table is not None

    def _add(self, src: UnitType, dest: UnitType, value: float):
        self._table.setdefault(src, {})[dest] = value
        self._table.setdefault(dest, {})[src] = 1 / value

    def _ensure_loaded(self):
        if self._table is not None:
            return
        with self._lock:
            if self._table is not None:
                return
            self._table = {}
            for unit, value in self._base_conversions.items():
                # value is base units per unit: converting unit -> base multiplies by it
                self._add(unit, self.base, value)
            log.debug("unit table loaded with %d base conversions", len(self._base_conversions))

    def entries(self) -> dict[tuple[UnitType, UnitType], float]:
        """Snapshot of every cached (src, dest) ratio."""
        self._ensure_loaded()
        with self._lock:
            return {(s, d): v for s, row in self._table.items() for d, v in row.items()}

    def conversion_scale(self, src, dest) -> float:
        """Factor that converts a length in src units to dest units."""
        src, dest = _unit(src), _unit(dest)
        if src == dest:
            return 1.0
        self._ensure_loaded()
        with self._lock:
            row = self._table.get(src, {})
            if dest not in row:
                try:
                    value = self._table[src][self.base] * self._table[self.base][dest]
                except KeyError:
                    raise UnknownUnit(f"No conversion from {src} to {dest}") from None
                self._add(src, dest, value)
                log.debug("derived conversion %s -> %s = %r", src, dest, value)
            return self._table[src][dest]


_default_table: UnitConversionTable | None = None
_default_lock = threading.Lock()

def default_table() -> UnitConversionTable:
    """Process-wide table, created on first call."""
    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = UnitConversionTable()
    return _default_table

def conversion_scale(src, dest, table: UnitConversionTable | None = None) -> float:
    """Ratio for converting src units to dest units, e.g. conversion_scale("inch", "mm") == 25.4."""
    return (table or default_table()).conversion_scale(src, dest)
