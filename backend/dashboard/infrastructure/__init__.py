"""Infrastructure Layer — database, hashing, identity provider, caches, logging.

Invariants:
    - Implements the protocols declared in core/repository_protocols.py
    - Library failures mapped to core/errors.py types before leaving this layer
"""
