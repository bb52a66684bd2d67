"""Tag taxonomies with an is-a relation.

This package models platform-family inheritance as a directed acyclic
graph and loads taxonomies from the built-in hierarchy or YAML files.
"""
