"""Adapters bridging lineprotopy to other libraries."""
