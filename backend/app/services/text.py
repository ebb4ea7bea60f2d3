"""Name normalization shared by the country and category services."""

from slugify import slugify


def title_case(name: str) -> str:
    """Trim, lower-case and capitalize every whitespace-separated word.

    Internal runs of whitespace collapse to one space, so ``"  united   KINGDOM "``
    and ``"United Kingdom"`` normalize to the same stored name.
    """

    return " ".join(word[:1].upper() + word[1:] for word in name.lower().split())


def make_slug(name: str) -> str:
    return slugify(name, lowercase=True)
