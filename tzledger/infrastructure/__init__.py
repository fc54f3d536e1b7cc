"""
Infrastructure Layer - concrete implementations of domain and application contracts.

Contains the in-memory timestamp store, the time zone database adapter,
structured logging, HTTP middleware and the dependency container.
"""
