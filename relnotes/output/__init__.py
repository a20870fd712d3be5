"""Output abstraction layer."""
