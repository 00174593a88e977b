"""A span between two dates counted in whole days."""


class Duration(int):
    """The elapsed number of days between two dates."""

    __slots__ = ()

    def days(self) -> int:
        """Return the duration as a plain integer number of days."""
        return int(self)

    def __repr__(self) -> str:
        return f"Duration({int(self)})"


DAY = Duration(1)