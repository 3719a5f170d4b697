"""Project names double as directory names and package.json "name" values."""

import re

from create_v1_app.errors import InvalidProjectNameError

_VALID_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_project_name(name: str) -> str | None:
    """Return an error message for an unusable project name, else None."""
    if not name.strip():
        return "This field cannot be empty. Try again."
    if not _VALID_NAME.match(name.strip()):
        return "Use letters, digits, '.', '_' or '-' (no spaces, quotes or path separators)."
    return None


def check_project_name(name: str) -> str:
    """Return the stripped name, or raise InvalidProjectNameError."""
    error = validate_project_name(name)
    if error is not None:
        raise InvalidProjectNameError(f"Invalid project name {name!r}: {error}")
    return name.strip()
