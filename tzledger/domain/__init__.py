"""
Domain Layer - Pure Timestamp Logic

This layer contains:
- Value Objects: Instant and ResolvedZone
- Services: zone conversion (parse, validate, render)
- Interfaces: contracts for the zone database

No web or storage dependencies allowed in this layer.
"""
