"""
Application Layer - use cases and configuration.

Orchestrates the domain services and the timestamp store on behalf of the
HTTP interface.
"""
