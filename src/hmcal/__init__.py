"""hmcal - terminal calendar with public and custom holidays."""

__version__ = "0.1.0"
