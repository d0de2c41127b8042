"""SystemField definition for the access context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from access.domain.value_objects import FieldType, SystemFieldId, SystemId


@dataclass
class SystemField:
    """A custom field that a system's owners attach to its access records.

    Field names are unique within a system. ``options`` lists the allowed
    values of a ``select`` field and is empty for other types.
    """

    id: SystemFieldId
    system_id: SystemId
    name: str
    created_at: datetime
    field_type: FieldType = FieldType.TEXT
    options: list[str] = field(default_factory=list)
    required: bool = False

    def __post_init__(self) -> None:
        self._validate_name(self.name)

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip() or len(name) > 255:
            raise ValueError("Field name must be between 1 and 255 characters")

    @classmethod
    def create(
        cls,
        system_id: SystemId,
        name: str,
        field_type: FieldType = FieldType.TEXT,
        options: list[str] | None = None,
        required: bool = False,
    ) -> SystemField:
        """Define a new field on a system.

        Raises:
            ValueError: If the name is empty or too long
        """
        return cls(
            id=SystemFieldId.generate(),
            system_id=system_id,
            name=name.strip(),
            field_type=field_type,
            options=_clean_options(options),
            required=required,
            created_at=datetime.now(UTC),
        )

    def update(
        self,
        name: str | None = None,
        field_type: FieldType | None = None,
        options: list[str] | None = None,
        required: bool | None = None,
    ) -> None:
        """Change the definition. ``None`` leaves a value unchanged."""
        if name is not None:
            self._validate_name(name)
            self.name = name.strip()
        if field_type is not None:
            self.field_type = field_type
        if options is not None:
            self.options = _clean_options(options)
        if required is not None:
            self.required = required


def _clean_options(options: list[str] | None) -> list[str]:
    return [option.strip() for option in options or [] if option.strip()]
