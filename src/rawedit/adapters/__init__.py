"""Hosts that drive the editor core."""
