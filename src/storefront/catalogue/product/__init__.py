from storefront.catalogue.product import (  # noqa: F401
    bulk,
    creation,
    details,
    events,
    images,
    lifecycle,
    product,
    repository,
    variants,
)
