from __future__ import annotations


class InvalidInputError(ValueError):
    pass


def validate_source(source: str | None) -> str:
    """
    Reject absent or blank input and return the trimmed text.

    The error message echoes the original, untrimmed value.
    """

    if source is None or source.strip() == "":
        raise InvalidInputError(f'Source string is empty: "{source}"')
    return source.strip()
