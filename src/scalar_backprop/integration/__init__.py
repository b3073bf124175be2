"""
Framework integrations.

Each integration is imported lazily so that the core engine never requires
the framework to be installed:

- `scalar_backprop.integration.torch`
"""

__all__ = ["torch"]
