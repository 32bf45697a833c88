"""Domain layer: the conversion rule type class and its result channel.

This layer depends only on stdlib.
It must never import from converters, integrations, or config.
"""
