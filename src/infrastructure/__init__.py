"""
Infrastructure Layer

Contains all external dependencies and implementations:
- HTTP clients for the storefront API services
- SQLAlchemy persistence of the client state
- Configuration management
- Logging infrastructure
- Localization and error handling utilities
"""
