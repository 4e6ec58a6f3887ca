"""Email address validation shared by account and checkout flows."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def validate_email(email: str | None, field: str = "email") -> str:
    """Return the normalized (trimmed, lowercased) address or raise ValidationError.

    Enforces structural validity only: exactly one ``@``, non-empty local and
    domain parts, a dotted domain without edge dots or hyphenated labels, no
    consecutive dots and no forbidden characters.
    """
    address = (email or "").strip().lower()
    error = ValidationError({field: ["Invalid email address"]})

    if not address or any(ch.isspace() for ch in address):
        raise error
    if address.count("@") != 1:
        raise error

    local_part, domain_part = address.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise error
    if not domain_part or "." not in domain_part:
        raise error
    if domain_part.startswith(".") or domain_part.endswith("."):
        raise error
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        raise error
    if ".." in address:
        raise error
    if any(ch in address for ch in _FORBIDDEN):
        raise error

    return address
