"""Reverse geolocation of coordinates to administrative boundaries."""
