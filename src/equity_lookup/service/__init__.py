"""
Service Package - Application Facade.

Components:
    - EquityService: Ingests lines into a store and answers queries

The service is responsible for:
    - Discarding the header line
    - Driving the record factory per line
    - Reporting rejected lines without aborting
    - Exposing lookup, listing and P/E queries

Design Principles:
    - All dependencies injected via constructor
    - The only fatal condition is input without a header line
"""

from equity_lookup.service.equity_service import AuditLoggerProtocol, EquityService

__all__ = ["AuditLoggerProtocol", "EquityService"]
