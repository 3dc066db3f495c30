"""Value object base: immutable, compared by value, validated on construction."""


class ValueObject:
    """
    Marker base for `Progress`, `Rating` and the entity ids.

    Subclasses are frozen dataclasses: the generated `__eq__` and `__hash__`
    compare field values, and `__post_init__` rejects invalid values.
    """
