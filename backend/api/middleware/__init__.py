"""Request-time gates for portal routes."""
