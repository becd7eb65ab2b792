"""Custom SQLAlchemy types used by the persistence layer."""

from enum import Enum

from sqlalchemy.types import String, TypeDecorator

from repairshop.core.errors import DataIntegrityError


class EnumString(TypeDecorator):
    """Persist a str Enum as its canonical string value.

    Reading a value outside the enum raises DataIntegrityError instead of
    falling back to a default.
    """

    cache_ok = True
    impl = String

    def __init__(self, enum_cls: type[Enum], length: int = 20) -> None:
        super().__init__(length)
        self.enum_cls = enum_cls

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value.value
        # Plain strings must still name a member
        try:
            return self.enum_cls(value).value
        except ValueError:
            raise DataIntegrityError(
                f"'{value}' is not a valid {self.enum_cls.__name__}",
            )

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return self.enum_cls(value)
        except ValueError:
            raise DataIntegrityError(
                f"Stored value '{value}' is not a valid {self.enum_cls.__name__}",
            )

    def copy(self, **kwargs):
        return EnumString(self.enum_cls, self.impl.length)
