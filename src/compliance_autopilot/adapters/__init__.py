"""Adapters - Infrastructure implementations of core interfaces.

This package contains the concrete implementations of the
Protocol interfaces defined in the core module.

Adapters are organized by type:
- licensing/: License validators (hosted license API, open core)
"""
