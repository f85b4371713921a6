"""welcomer: interactive name and age greeting CLI."""

__version__ = "0.1.0"
