from storefront.identity.user import (  # noqa: F401
    addresses,
    authentication,
    events,
    profile,
    recovery,
    registration,
    repository,
    user,
    verification,
)
