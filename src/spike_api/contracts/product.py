"""Product line item attached to a charge for itemization."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union


@dataclass
class Product:
    id: str = ""
    title: str = ""
    description: str = ""
    language: str = "EN"
    price: Union[int, float] = 0
    currency: str = ""
    count: int = 0
    stock: int = 0

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Build a Product, ignoring keys that are not product fields."""
        known = cls.field_names()
        return cls(**{k: v for k, v in data.items() if k in known})

    def get(self, name: str) -> Optional[Any]:
        """Return the value of ``name``, or None for unknown attributes."""
        if name not in self.field_names():
            return None
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        """Set ``name`` to ``value``. Unknown attribute names are ignored."""
        if name in self.field_names():
            setattr(self, name, value)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
