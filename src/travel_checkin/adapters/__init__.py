"""Adapters layer - infrastructure implementations of the domain ports."""
