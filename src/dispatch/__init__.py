"""Version-aware dispatch.

This package selects the most specific handler or static value for a
platform family, platform version, and component version query.
"""
