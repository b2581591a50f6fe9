from __future__ import annotations

from typing import Optional


class VisitorConfError(ValueError):
    """Base class for every visitor configuration failure."""

    def __init__(self, message: str, name: str = "", visitor_type: str = "") -> None:
        super().__init__(message)
        self.name = name
        self.visitor_type = visitor_type


class MissingTypeError(VisitorConfError):
    def __init__(self, name: str) -> None:
        super().__init__(f"visitor [{name}] type shouldn't be empty", name=name)


class UnknownTypeError(VisitorConfError):
    def __init__(self, name: str, visitor_type: str) -> None:
        super().__init__(
            f"visitor [{name}] type [{visitor_type}] error",
            name=name,
            visitor_type=visitor_type,
        )


class DecodeError(VisitorConfError):
    """A raw section value could not be converted to its field type."""

    def __init__(self, message: str, name: str = "", visitor_type: str = "") -> None:
        super().__init__(message, name=name, visitor_type=visitor_type)


class ConfigError(VisitorConfError):
    def __init__(self, name: str, visitor_type: str, cause: Optional[BaseException] = None) -> None:
        msg = f"visitor [{name}] type [{visitor_type}] error"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg, name=name, visitor_type=visitor_type)
        self.cause = cause


class ValidationError(VisitorConfError):
    """An invariant checked by ``check()`` does not hold.

    ``field`` is the INI key of the offending value (``role``,
    ``bind_addr``, ``bind_port``, ...).
    """

    def __init__(self, field: str, message: str, name: str = "", visitor_type: str = "") -> None:
        super().__init__(message, name=name, visitor_type=visitor_type)
        self.field = field
