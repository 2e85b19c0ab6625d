"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Road map storage (text input, CSV files)
- Route computation (Dijkstra)
- Output rendering (plain text)
- Caching systems (in-memory, null)
"""
