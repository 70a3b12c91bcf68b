"""Local key-value storage backends."""
