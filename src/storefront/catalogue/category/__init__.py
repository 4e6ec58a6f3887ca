from storefront.catalogue.category import category, events, management, repository  # noqa: F401
