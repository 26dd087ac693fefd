"""Domain layer: directives, field values, and the error taxonomy.

This layer depends only on stdlib.
It must never import from engine, services, commands, or config.
"""
