"""
Registry of named day count conventions.

A registry is an immutable, ordered mapping from canonical name to
convention. The process-wide default registry holds the built-in conventions
and is created on first use. Additional conventions are added by building an
extended registry, which leaves the original untouched.
"""

import logging
import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple

import pandas as pd

from daycountlib.errors import ConventionNotFoundError, DuplicateConventionError

from .daycount import STANDARD_DAY_COUNTS, DayCount, DayCountConvention

logger = logging.getLogger(__name__)


class DayCountRegistry:
    """Immutable lookup table of day count conventions keyed by exact name."""

    def __init__(self, conventions: Iterable[DayCountConvention]):
        by_name = {}
        ordered = []
        for convention in conventions:
            if not isinstance(convention, DayCountConvention):
                raise TypeError(f"Not a day count convention: {convention!r}")
            if convention.name in by_name:
                raise DuplicateConventionError(
                    f"Day count '{convention.name}' already registered"
                )
            by_name[convention.name] = convention
            ordered.append(convention)
        self._by_name = MappingProxyType(by_name)
        self._ordered: Tuple[DayCountConvention, ...] = tuple(ordered)

    def lookup(self, name: str) -> DayCountConvention:
        """Return the convention registered under the given name."""
        try:
            return self._by_name[name]
        except KeyError as exc:
            raise ConventionNotFoundError(
                f"Unknown day count convention: {name}. "
                f"Available: {list(self._by_name.keys())}"
            ) from exc

    def list_all(self) -> Tuple[DayCountConvention, ...]:
        """All conventions in registration order."""
        return self._ordered

    def names(self) -> Tuple[str, ...]:
        return tuple(convention.name for convention in self._ordered)

    def extended(self, *conventions: DayCountConvention) -> "DayCountRegistry":
        """Return a new registry with the given conventions appended."""
        return DayCountRegistry(self._ordered + conventions)

    def to_frame(self) -> pd.DataFrame:
        """Describe the registered conventions as a DataFrame."""
        rows = []
        for convention in self._ordered:
            if isinstance(convention, DayCount):
                kind = convention.kind.name
                description = convention.description
            else:
                kind = type(convention).__name__
                description = (type(convention).__doc__ or "").strip()
            rows.append(
                {"name": convention.name, "type": kind, "description": description}
            )
        return pd.DataFrame(rows, columns=["name", "type", "description"])

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[DayCountConvention]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"DayCountRegistry({list(self._by_name.keys())})"


_DEFAULT_REGISTRY: Optional[DayCountRegistry] = None
_DEFAULT_REGISTRY_LOCK = threading.Lock()


def default_registry() -> DayCountRegistry:
    """Get the registry of built-in conventions, initializing it on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_REGISTRY_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = DayCountRegistry(STANDARD_DAY_COUNTS)
                logger.debug(
                    "Initialized day count registry with %s conventions",
                    len(_DEFAULT_REGISTRY),
                )
    return _DEFAULT_REGISTRY


def get_day_count(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    return default_registry().lookup(name)


def list_day_counts() -> Tuple[DayCountConvention, ...]:
    """All built-in conventions in registration order."""
    return default_registry().list_all()
