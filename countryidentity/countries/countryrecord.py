"""Value object view of a country record."""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping


def _as_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Country:
    """Immutable ISO 3166-1 country entry.

    Identifier fields are always present; currency and the descriptive
    fields are tuples so the object stays hashable.
    """

    name: str
    alpha2: str
    alpha3: str
    numeric: str
    currency: tuple[str, ...] = ()
    adjectival: tuple[str, ...] = field(default=(), compare=False)
    demonym: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_record(cls, record: Mapping) -> "Country":
        return cls(
            name=record["name"],
            alpha2=record["alpha2"],
            alpha3=record["alpha3"],
            numeric=record["numeric"],
            currency=_as_tuple(record.get("currency")),
            adjectival=_as_tuple(record.get("adjectival")),
            demonym=_as_tuple(record.get("demonym")),
        )

    def to_dict(self) -> dict:
        """Return the record form (lists instead of tuples)."""
        return {k: list(v) if isinstance(v, tuple) else v for k, v in asdict(self).items()}


__all__ = ["Country"]
