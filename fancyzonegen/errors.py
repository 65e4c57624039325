"""Exceptions raised by the zone generator."""


class FancyZoneGenError(Exception):
    """Base class for generator errors."""


class ExitCodeError(FancyZoneGenError):
    """An anticipated failure that ends the run with a specific exit status."""

    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigFileMissingError(ExitCodeError):
    """custom-layouts.json does not exist."""

    exit_code = 1

    def __init__(self):
        super().__init__("custom-layouts.json missing")


class NoCanvasLayoutsError(ExitCodeError):
    """The document has no layout of type "canvas"."""

    exit_code = 2

    def __init__(self):
        super().__init__("No canvas type layouts found")
