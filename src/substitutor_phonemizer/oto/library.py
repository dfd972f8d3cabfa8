"""Sample library lookup used by the oto resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Protocol

from substitutor_phonemizer.models import OtoRecord


class OtoLibrary(Protocol):
    """Capability consumed by the resolver: exact, case-sensitive alias lookup."""

    def try_get_mapped_oto(self, alias: str, tone: int, color: str) -> OtoRecord | None:
        """Return the sample mapped for ``alias`` at ``tone`` and ``color``, if any."""


@dataclass(frozen=True)
class Subbank:
    """Pitch/colour-scoped alias mapping.

    A subbank rewrites ``alias`` to ``prefix + alias + suffix`` for every tone
    in ``tones`` when the requested colour matches.
    """

    color: str = ""
    prefix: str = ""
    suffix: str = ""
    tones: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class InMemoryOtoLibrary:
    """Read-only in-memory sample library.

    Records are indexed by alias once; the first record wins when an alias is
    declared twice. Subbanks are scanned in declaration order.
    """

    records: tuple[OtoRecord, ...]
    subbanks: tuple[Subbank, ...] = ()

    @cached_property
    def records_by_alias(self) -> dict[str, OtoRecord]:
        """Build and cache the alias index.

        Returns:
            Dictionary mapping alias text to its first declared record.
        """

        mapping: dict[str, OtoRecord] = {}
        for record in self.records:
            mapping.setdefault(record.alias, record)
        return mapping

    def find_subbank(self, tone: int, color: str) -> Subbank | None:
        """Return the first subbank with colour ``color`` covering ``tone``.

        Args:
            tone: Pitch index after tone shift.
            color: Requested voice colour, ``""`` for the default subbanks.

        Returns:
            Matching subbank or ``None``.
        """

        for subbank in self.subbanks:
            if subbank.color == color and tone in subbank.tones:
                return subbank
        return None

    def try_get_mapped_oto(self, alias: str, tone: int, color: str) -> OtoRecord | None:
        """Look up ``alias`` through the matching subbank, then as-is.

        Args:
            alias: Candidate alias text.
            tone: Pitch index after tone shift.
            color: Requested voice colour, ``""`` for none.

        Returns:
            The mapped record, or ``None`` when neither form exists.
        """

        index = self.records_by_alias
        subbank = self.find_subbank(tone, color)
        if subbank is not None:
            mapped = index.get(f"{subbank.prefix}{alias}{subbank.suffix}")
            if mapped is not None:
                return mapped
        return index.get(alias)
