"""Routing — directory-shaped path resolution, hooks, and pattern routes."""
