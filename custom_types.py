from typing import Sequence, Union

import torch
from typing_extensions import TypedDict

"""
Shared types for the tensor formatting helpers
"""

Sizes = Union[torch.Size, Sequence[int]]


class TensorSummary(TypedDict):
    sizes: list[int]
    dtype: str
    device: str
    requires_grad: bool
