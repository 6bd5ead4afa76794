import os

rental_mode = os.getenv("RENTAL_MODE", "development")
"""The operational mode of the rental service."""
