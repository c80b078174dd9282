"""Core domain logic: registry errors and shared utilities."""
