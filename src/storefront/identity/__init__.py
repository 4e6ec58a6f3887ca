"""Identity area: user accounts, passwords and session tokens."""

from storefront.identity import user  # noqa: F401
