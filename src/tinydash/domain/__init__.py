"""Domain layer — sentinel, truthiness and equality rules.

This layer depends only on stdlib.
It must never import from config, telemetry, or the utility modules.
"""
