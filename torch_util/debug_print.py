from typing import Optional, Union

from torch import Tensor

from custom_types import Sizes
from torch_util.formatting import sizes_str, tensor_values_str


def dbg_tensor(t: Tensor) -> str:
    return tensor_values_str(t)


def dbg(sizes: Sizes) -> str:
    return sizes_str(sizes)


def dbgp(obj: Union[Tensor, Sizes], name: Optional[str] = None) -> None:
    """
    Print a tensor's values or a shape, optionally labelled.

    Args:
        obj: Tensor, torch.Size or any sequence of ints
        name: Label printed before the value; tensors go on the next line
    """
    if isinstance(obj, Tensor):
        text = dbg_tensor(obj)
        print(f"{name}:\n{text}" if name is not None else text)
    else:
        text = dbg(obj)
        print(f"{name}: {text}" if name is not None else text)
