"""Core cascade engine for Themer."""
