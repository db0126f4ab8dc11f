"""
Citas

A small FastAPI service that books appointment requests ("citas") into a
single-file SQLite database and serves the booking form.
"""

__version__ = "1.0.0"
