"""Infrastructure: key-value stores, settings files and logging setup."""
