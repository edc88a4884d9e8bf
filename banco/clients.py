"""Bank clients and their sequential identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass
class Client:
    """A bank client.

    When no ``id`` is given, the next free identifier is assigned. An explicit
    ``id`` higher than any seen so far advances the counter, so identifiers
    handed out later never collide with it.
    """

    name: str
    address: str
    id: int | None = None

    _last_id: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if self.id is None:
            Client._last_id += 1
            self.id = Client._last_id
        elif self.id > Client._last_id:
            Client._last_id = self.id

    def to_dict(self) -> dict[str, Any]:
        """Return the client as a JSON-ready mapping."""
        return {"id": self.id, "nombre": self.name, "direccion": self.address}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Client:
        """Build a client from a mapping produced by :meth:`to_dict`.

        Raises KeyError if a field is missing.
        """
        return cls(
            name=str(data["nombre"]),
            address=str(data["direccion"]),
            id=int(data["id"]),
        )

    @classmethod
    def reset_ids(cls, last_id: int) -> None:
        """Set the last identifier handed out; the next client gets ``last_id + 1``."""
        Client._last_id = last_id