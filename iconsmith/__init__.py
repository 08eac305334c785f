"""iconsmith — SVG icon set to typed UI components."""

__version__ = "0.1.0"
