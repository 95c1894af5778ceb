"""Ore & Economic Geology AI: multi-scale observations to deposit analysis."""
