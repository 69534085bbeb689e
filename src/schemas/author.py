"""Author domain object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """A blog author.

    Authors are built once per load and shared by reference between the
    articles that name them.

    Attributes:
        id: Author identifier, unique within a load
        first_name: Given name (non-empty)
        last_name: Family name (non-empty)
    """

    id: int
    first_name: str
    last_name: str

    def __post_init__(self):
        if not self.first_name or not self.last_name:
            raise ValueError(
                f"Author {self.id} must have a non-empty first and last name"
            )

    def full_name(self) -> str:
        """Return the full name, e.g. "Bob Lee"."""
        return f"{self.first_name} {self.last_name}"

    def short_name(self) -> str:
        """Return the first initial and last name, e.g. "B.Lee".

        Examples:
            >>> Author(1, "bob", "lee").short_name()
            'B.lee'
        """
        return f"{self.first_name[0].upper()}.{self.last_name}"

    def initials(self) -> str:
        """Return both initials, e.g. "B.L".

        Examples:
            >>> Author(1, "bob", "lee").initials()
            'B.L'
        """
        return f"{self.first_name[0]}.{self.last_name[0]}".upper()
