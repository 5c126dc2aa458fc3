"""Generate passwords and keep them AES-encrypted in a JSON vault file."""

__version__ = "0.1.0"