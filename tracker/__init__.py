"""Task Tracker API."""
