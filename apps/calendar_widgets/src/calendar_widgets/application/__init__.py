"""Calendar year assembly."""
