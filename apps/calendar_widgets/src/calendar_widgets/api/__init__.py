"""Public handlers returning plain payloads."""
