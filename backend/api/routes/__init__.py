"""Portal route modules."""
