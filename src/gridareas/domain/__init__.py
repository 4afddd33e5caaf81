"""Domain layer: grammar, area registry, and CSS emission.

This layer depends only on stdlib.
It must never import from services, plugins, commands, output, or config.
"""
