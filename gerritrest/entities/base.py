"""
Base class for typed records decoded from Gerrit JSON.
All entity implementations should inherit from this class.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import EntityDecodeError

E = TypeVar("E", bound="Entity")


class Entity(BaseModel):
    """Base class for all Gerrit entities."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Field used to key entities when the server returns a JSON array
    key_field: ClassVar[str | None] = None

    @classmethod
    def decode_one(cls: type[E], data: Any) -> E:
        """Build one entity from a decoded JSON object."""
        if not isinstance(data, dict):
            raise EntityDecodeError(
                f"Expected a JSON object for {cls.__name__}, "
                f"got {type(data).__name__}",
                data,
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise EntityDecodeError(
                f"Invalid {cls.__name__}: {e}", data
            ) from e

    @classmethod
    def decode_list(cls: type[E], data: Any) -> dict[str, E]:
        """
        Decode a collection of entities, keyed and ordered as the server
        sent them.

        Accepts either a JSON object of objects (keyed by the outer key)
        or a JSON array, in which case each entity is keyed by
        ``key_field``.
        """
        if isinstance(data, dict):
            return {key: cls.decode_one(value) for key, value in data.items()}

        if isinstance(data, list):
            if cls.key_field is None:
                raise EntityDecodeError(
                    f"{cls.__name__} cannot be keyed from a JSON array", data
                )
            entities = {}
            for item in data:
                entity = cls.decode_one(item)
                entities[getattr(entity, cls.key_field)] = entity
            return entities

        raise EntityDecodeError(
            f"Expected a JSON object or array of {cls.__name__}, "
            f"got {type(data).__name__}",
            data,
        )

    def to_json(self) -> dict[str, Any]:
        """Request body representation, without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)
