"""Resilience – pacing for operations that lose races and try again."""
