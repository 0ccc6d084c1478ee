import enum


class PrintableEnum(enum.Enum):
    """Prints as the lowercase member name, so it reads naturally inside messages."""

    def __str__(self) -> str:
        return self.name.lower()

    __repr__ = __str__
