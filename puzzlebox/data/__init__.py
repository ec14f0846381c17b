"""Sub-package set aside for puzzle inputs; it currently holds none."""

__all__: list[str] = []