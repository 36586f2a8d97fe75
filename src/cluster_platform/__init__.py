"""Resolve the platform type of an OpenShift cluster."""

__version__ = "0.1.0"
