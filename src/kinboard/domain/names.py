"""Full-name parsing into first, middle and last name parts."""

from dataclasses import dataclass

from kinboard.domain.errors import ValidationError

EMPTY_FULL_NAME_MESSAGE = "fullName cannot be an empty string."


@dataclass(frozen=True)
class ParsedName:
    """Name parts split out of a full name. Missing parts are None."""

    first_name: str
    middle_name: str | None = None
    last_name: str | None = None

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(part for part in parts if part)


def parse_full_name(full_name: str) -> ParsedName:
    """Split a full name on whitespace.

    One token is a first name only, two are first and last, and with three or
    more everything between the first and last token is the middle name.
    """
    if not isinstance(full_name, str):
        raise ValidationError("fullName must be a string.")
    tokens = full_name.split()
    match tokens:
        case []:
            raise ValidationError(EMPTY_FULL_NAME_MESSAGE)
        case [first]:
            return ParsedName(first_name=first)
        case [first, last]:
            return ParsedName(first_name=first, last_name=last)
        case [first, *middle, last]:
            return ParsedName(
                first_name=first, middle_name=" ".join(middle), last_name=last
            )
