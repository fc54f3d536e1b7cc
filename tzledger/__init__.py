"""
tzledger - timestamp ledger with time zone replay.

Clients submit RFC 3339 timestamps, the service stores them as UTC instants
and renders the whole ledger back in any IANA time zone on request.
"""

__version__ = "1.0.0"
