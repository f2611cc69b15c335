"""Identifiers for logged meals."""

from dataclasses import dataclass
from uuid import uuid4

from nutrilog.domain.errors import InvalidArgumentError


@dataclass(frozen=True)
class MealId:
    """Opaque, value-compared identifier of a logged meal."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("Meal id value must not be blank.")

    @classmethod
    def random(cls) -> "MealId":
        """Return a new identifier backed by a random UUID."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
