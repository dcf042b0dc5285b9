"""Adapters layer - concrete implementations of port interfaces."""
