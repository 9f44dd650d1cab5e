"""Protocols and type aliases shared across the msm packages."""
