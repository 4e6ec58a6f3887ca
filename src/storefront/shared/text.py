"""Text helpers shared across the storefront."""

import random
import re
import time


def slugify(text: str) -> str:
    """Turn a display name into a URL slug.

    ``"Blå Glaserad Skål!"`` becomes ``"blå-glaserad-skål"``: word characters
    survive (including non-ASCII letters), whitespace/underscores/hyphen runs
    collapse to one hyphen, and edge hyphens are stripped.
    """
    slug = text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def generate_order_number() -> str:
    """Customer-facing order reference, e.g. ``GB-1718035200000-417``."""
    timestamp = int(time.time() * 1000)
    return f"GB-{timestamp}-{random.randint(0, 999)}"


def normalize_email(email: str) -> str:
    return email.strip().lower()
