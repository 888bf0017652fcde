"""Kernel – error hierarchy and time sources shared by every layer."""
