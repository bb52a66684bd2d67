"""Shared core layer.

This module holds errors, configuration, logging, and typed models used by
the versions, taxonomy, and dispatch packages.
"""
