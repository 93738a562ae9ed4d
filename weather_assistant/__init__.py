"""Natural-language weather assistant: extract a location, fetch the weather, answer."""

__version__ = "1.0.0"
