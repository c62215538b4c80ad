"""
Seed data for filter definitions.

This package contains JSON catalogs loaded when no catalog path is configured:
- default_filters.json: Select and date selector filters for an orders list
"""
