from fancyzonegen.errors import ConfigFileMissingError, ExitCodeError, NoCanvasLayoutsError


def test_exit_codes_and_messages():
    missing = ConfigFileMissingError()
    no_canvas = NoCanvasLayoutsError()

    assert isinstance(missing, ExitCodeError)
    assert (missing.exit_code, missing.message) == (1, "custom-layouts.json missing")
    assert (no_canvas.exit_code, no_canvas.message) == (2, "No canvas type layouts found")
