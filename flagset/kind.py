from enum import Enum


class Kind(Enum):
    """Declared type of an option's value; fixed at registration."""

    BOOL = "bool"
    INT = "int"
    STRING = "string"

    @property
    def requires_value(self) -> bool:
        """Non-boolean options consume the following token as their value."""
        return self is not Kind.BOOL

    @property
    def python_type(self) -> type:
        return _python_types[self]

    def __str__(self):
        return self.value


_python_types = {
    Kind.BOOL: bool,
    Kind.INT: int,
    Kind.STRING: str,
}
