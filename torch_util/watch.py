"""
Short formatters meant to be typed into a debugger's expression evaluator,
e.g. ``p ptf(hidden)`` in pdb or ``pt(x)`` in an IDE watch window.

Every function accepts ``None`` and returns NULL_TENSOR_ERROR for it, so a
watch on a variable that has not been assigned yet stays readable.
"""
from typing import Optional

from torch import Tensor

from constants import NULL_TENSOR_ERROR
from torch_util.args import DebugArgs
from torch_util.formatting import (
    sizes_str,
    tensor_first_slice_str,
    tensor_full_str,
    tensor_header_str,
)


def pt(t: Optional[Tensor]) -> str:
    """Header only: sizes, dtype, device and requires_grad."""
    if t is None:
        return NULL_TENSOR_ERROR
    return tensor_header_str(t)


def ptv(t: Optional[Tensor]) -> str:
    """Full value dump. Use explicitly, not as a watch summary."""
    if t is None:
        return NULL_TENSOR_ERROR
    return tensor_full_str(t)


def ptf(t: Optional[Tensor], args: Optional[DebugArgs] = None) -> str:
    if t is None:
        return NULL_TENSOR_ERROR
    return tensor_first_slice_str(t, args)


def ps(t: Optional[Tensor]) -> str:
    """Shape only."""
    if t is None:
        return NULL_TENSOR_ERROR
    return sizes_str(t.shape)
