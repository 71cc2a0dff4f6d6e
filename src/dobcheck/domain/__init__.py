"""Domain layer — calendar values, zoned instants, and age evaluators.

This layer depends only on stdlib and lunardate.
It must never import from services, commands, config, or output.
"""
