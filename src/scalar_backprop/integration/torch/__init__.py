"""
PyTorch integration for scalar-backprop.

Exports:
- `torch_gradients`: replay a scalar graph under torch autograd for cross-checks.
"""

from .reference import torch_gradients

__all__ = ["torch_gradients"]
