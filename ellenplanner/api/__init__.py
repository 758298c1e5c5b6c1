"""HTTP API for ellenplanner."""
