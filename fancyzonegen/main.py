"""Zone generator entry point.

Reads custom-layouts.json, lets the user pick a canvas layout, fills it with
the fixed 21-zone grid and writes the file back after backing it up.
"""

import logging
import sys
from typing import Callable

from fancyzonegen.config import Settings, get_settings
from fancyzonegen.errors import ExitCodeError, NoCanvasLayoutsError
from fancyzonegen.schemas.layout import CanvasLayout
from fancyzonegen.services.backup_service import ensure_backup
from fancyzonegen.services.document_service import LayoutDocument
from fancyzonegen.services.selection_service import select_layout
from fancyzonegen.services.zone_service import compute_zones, describe_splits

logger = logging.getLogger(__name__)


def run(settings: Settings, input_func: Callable[[], str] = input) -> CanvasLayout:
    """Perform one update and return the layout that was filled.

    Raises:
        ConfigFileMissingError: the layouts file does not exist.
        NoCanvasLayoutsError: the file has no canvas layout.
    Any other failure (missing fields, malformed JSON) propagates unchanged.
    """
    config_file = settings.resolved_config_file()
    print(f"Reading from {config_file}")

    document = LayoutDocument.load(config_file)

    layouts = document.canvas_layouts()
    if not layouts:
        raise NoCanvasLayoutsError()

    target = select_layout(layouts, input_func=input_func)

    layout = CanvasLayout.model_validate(target)
    ref_width = layout.info.ref_width
    ref_height = layout.info.ref_height
    print(f"Updating {layout.name} ({ref_width}x{ref_height})")

    backup = ensure_backup(config_file, document.content_hash)
    if backup.created:
        print(f"Backing up original to: {backup.path.name}")
    else:
        print(f"Backup already exists at: {backup.path.name}")

    print(describe_splits(ref_width))
    zones = compute_zones(ref_width, ref_height)

    document.replace_zones(target, zones)
    document.save(indent=settings.indent)

    print("Done, restart PowerToys to apply changes.")
    return layout


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        run(settings)
    except ExitCodeError as e:
        print(e.message, file=sys.stderr)
        logger.debug(f"Exiting with status {e.exit_code}: {e.message}")
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
