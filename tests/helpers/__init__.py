"""Shared helpers for building fixture projects in tests."""
