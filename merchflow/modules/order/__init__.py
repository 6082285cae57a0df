"""Order lifecycle, creation and vendor updates."""
