"""Local form validation: immutable container for cleaned data or errors.

Actions validate their input before any network call. A failed validation
is rendered inline next to the form and never reaches the backend.
"""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating form data.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = require(form, name="Please enter your name")
        if not result:
            return show_error(region, result.first_error)

    ``data`` contains the stripped string values for all required fields
    (only populated when there are no errors).

    ``errors`` maps field names to error messages, in the order the fields
    were checked::

        {"name": "Please enter your name"}
    """

    data: dict[str, str]
    errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    @property
    def first_error(self) -> str:
        """The message to show inline: the first failed field's message."""
        return next(iter(self.errors.values()), "")

    def __bool__(self) -> bool:
        """Falsy when invalid: enables the ``if not result:`` pattern."""
        return self.is_valid


def field(form: Mapping[str, object], name: str) -> str:
    """Return ``form[name]`` as a stripped string (``""`` when absent)."""
    value = form.get(name)
    if value is None:
        return ""
    return str(value).strip()


def require(form: Mapping[str, object], **messages: str) -> ValidationResult:
    """Check that every field named in *messages* is non-empty after stripping.

    Each keyword maps a field name to the message shown when it is missing::

        require(form, name="Please enter your name", email="Please enter your email")
    """
    data: dict[str, str] = {}
    errors: dict[str, str] = {}
    for name, message in messages.items():
        value = field(form, name)
        if not value:
            errors[name] = message
        else:
            data[name] = value
    if errors:
        return ValidationResult(data={}, errors=errors)
    return ValidationResult(data=data, errors={})
