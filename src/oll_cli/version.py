"""Single source of truth for the oll-cli version string."""

__version__: str = "0.3.0"
