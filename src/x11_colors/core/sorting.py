"""Ordering of catalog names for display."""

from typing import Iterable

from x11_colors.core.catalog import ascii_fold


def sort_names(names: Iterable[str]) -> list[str]:
    """
    Sort names ascending, ignoring ASCII case.

    The sort is stable: names that compare equal keep their input order.
    """
    return sorted(names, key=ascii_fold)
