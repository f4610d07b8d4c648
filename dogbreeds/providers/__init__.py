"""Concrete breed providers.

- ``breed`` -- data sources that answer lookups themselves (dog.ceo API).
- ``cache`` -- decorators that wrap another provider.
"""
