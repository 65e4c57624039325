"""FancyZoneGen - fills a PowerToys FancyZones canvas layout with a fixed zone grid."""

__version__ = "0.1.0"
