from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

ALL = "all"


def filter_by_category(
    items: Sequence[T],
    selection: str,
    category: Callable[[T], Any],
) -> List[T]:
    """
    Return the items whose category equals `selection`.
    List-valued categories (post tags) match when they contain it.
    The ALL sentinel returns the input unchanged.
    """
    if selection == ALL:
        return list(items)
    res = []
    for item in items:
        value = category(item)
        if isinstance(value, (list, tuple, set)):
            if selection in value:
                res.append(item)
        elif value == selection:
            res.append(item)
    return res


def category_options(values: Iterable[Optional[str]]) -> List[str]:
    return [ALL] + sorted({v for v in values if v})
