"""Projectile trajectory simulation with air drag, wind, parameter sweeps and plots."""

__version__ = "0.1.0"