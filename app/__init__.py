"""Learning analytics service."""
