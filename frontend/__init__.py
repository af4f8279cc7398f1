"""Static upload form served by the API."""
