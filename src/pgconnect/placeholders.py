"""Rewrite numbered ``$n`` markers into a driver's paramstyle."""

import re

from pgconnect.types import Params

_POSITIONAL = re.compile(r"\$(\d+)")


def bind_positional(sql: str, params: Params | None, marker: str) -> tuple[str, tuple]:
    """Replace each ``$n`` in ``sql`` with ``marker`` and order the values to match.

    A marker may appear more than once. Every supplied value must be
    referenced by at least one marker, and every marker must have a value.
    """
    values = tuple(params or ())
    if not values:
        match = _POSITIONAL.search(sql)
        if match:
            raise ValueError(f"No value bound for ${match.group(1)} (0 supplied)")
        return sql, ()

    if marker == "%s":
        sql = sql.replace("%", "%%")

    ordered: list = []
    used: set[int] = set()

    def _substitute(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise ValueError(f"No value bound for ${index} ({len(values)} supplied)")
        used.add(index)
        ordered.append(values[index - 1])
        return marker

    rewritten = _POSITIONAL.sub(_substitute, sql)

    unused = sorted(set(range(1, len(values) + 1)) - used)
    if unused:
        raise ValueError(
            f"Expected {len(used)} arguments, got {len(values)} "
            f"(unreferenced: {', '.join(f'${i}' for i in unused)})"
        )
    return rewritten, tuple(ordered)
