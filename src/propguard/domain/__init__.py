"""Domain layer — property values, validation rules, message templating.

This layer depends only on the stdlib.
It must never import from config.
"""
