from __future__ import annotations
import operator
from typing import Callable, List, TypeVar

from comparable import Comparable, SupportsLessThan

T = TypeVar("T", bound=SupportsLessThan)
C = TypeVar("C", bound=Comparable)


def insertion_sort(a: List[T], less: Callable[[T, T], bool] = operator.lt) -> List[T]:
    """Sort `a` ascending in place and return it.

    Each element is swapped leftward while `less(a[j], a[j - 1])` holds, so
    equal elements keep their relative order. Lists shorter than two are
    returned without calling `less`.
    """
    n = len(a)
    if n < 2:
        return a
    for i in range(1, n):
        j = i
        while j > 0 and less(a[j], a[j - 1]):
            a[j], a[j - 1] = a[j - 1], a[j]
            j -= 1
    return a


def insertion_sort_int(a: List[int]) -> List[int]:
    return insertion_sort(a)


def insertion_sort_str(a: List[str]) -> List[str]:
    return insertion_sort(a)


def insertion_sort_rational(a: List[C]) -> List[C]:
    # ordering through the Comparable contract, not the < operator
    return insertion_sort(a, lambda x, y: x.less_than(y))
