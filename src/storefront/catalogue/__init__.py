"""Catalogue area: products and categories.

Domain traversal only loads modules one level below ``domain.py``, so the
aggregate packages are imported here.
"""

from storefront.catalogue import category, product  # noqa: F401
