"""Encoders for measurements."""
