"""Selection Service - Lets the user choose which canvas layout to fill."""

import logging
from typing import Callable, TextIO

from fancyzonegen.schemas.layout import LayoutEntry

logger = logging.getLogger(__name__)


def parse_index(text: str, count: int) -> int | None:
    """1-based index typed by the user, or None if it is not an integer in [1, count]."""
    text = text.strip()
    if not text.isascii() or "_" in text:
        return None
    try:
        index = int(text)
    except ValueError:
        return None
    if index < 1 or index > count:
        return None
    return index


def select_layout(
    layouts: list[dict],
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> dict:
    """Return the chosen layout entry.

    A single layout is returned without asking. Otherwise the numbered list
    and prompt are printed until a valid index is entered; there is no retry
    limit and EOFError from ``input_func`` propagates.
    """
    if len(layouts) == 1:
        return layouts[0]

    names = [LayoutEntry.model_validate(layout).name for layout in layouts]
    while True:
        for i, name in enumerate(names, start=1):
            print(f"[{i}] {name}", file=output)
        print(f"Which layout to fill? [1-{len(names)}] > ", end="", file=output, flush=True)

        index = parse_index(input_func(), len(names))
        if index is not None:
            logger.debug(f"Selected layout {index}: {names[index - 1]}")
            return layouts[index - 1]
