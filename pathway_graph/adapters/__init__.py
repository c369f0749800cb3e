"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Seed data storage (CSV files)
- Caching systems (in-memory, null)
"""
