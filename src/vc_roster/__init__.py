"""Mirror Discord voice channel occupancy into a Google Sheets roster."""

__version__ = "0.1.0"
