"""Steps of the zone generation procedure."""

from fancyzonegen.services.backup_service import BackupResult, backup_path, ensure_backup
from fancyzonegen.services.document_service import LayoutDocument
from fancyzonegen.services.selection_service import parse_index, select_layout
from fancyzonegen.services.zone_service import compute_zones, describe_splits, split_points

__all__ = [
    "BackupResult",
    "backup_path",
    "ensure_backup",
    "LayoutDocument",
    "parse_index",
    "select_layout",
    "compute_zones",
    "describe_splits",
    "split_points",
]
