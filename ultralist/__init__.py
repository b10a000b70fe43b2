"""ultralist - grouped, color-coded todo lists for the terminal."""

__version__ = "0.3.0"
