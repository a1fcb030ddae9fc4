"""Token comparison helpers shared by the store, codec and front end."""


def tokens_equal(a: str, b: str) -> bool:
    """Case-insensitive equality. Whitespace must match exactly."""
    return a.casefold() == b.casefold()


def ends_with_suffix(s: str, suffix: str) -> bool:
    """Case-sensitive suffix test, used for the ``.ini`` filename check."""
    if len(s) < len(suffix):
        return False
    return s.endswith(suffix)
