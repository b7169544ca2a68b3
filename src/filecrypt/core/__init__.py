"""Core package of FileCrypt."""
