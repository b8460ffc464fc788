"""Utilities for Critical Inliner."""
