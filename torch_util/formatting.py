import logging
import math
import re
from typing import Optional

import torch
from jaxtyping import Shaped
from torch import Tensor

from constants import EMPTY_MARKER, TRUNCATION_MARKER
from custom_types import Sizes, TensorSummary
from torch_util.args import DEFAULT_ARGS, DebugArgs

logger = logging.getLogger(__name__)

TENSOR_PREFIX = "tensor("

# First keyword argument PyTorch appends after the values, e.g. ", dtype=torch.int32"
METADATA_KEYWORD = re.compile(r",\s*[a-z_]+=")


def tensor_summary(t: Tensor) -> TensorSummary:
    """Collect the metadata shown in a header without reading any values."""
    return TensorSummary(
        sizes=list(t.shape),
        dtype=str(t.dtype).removeprefix("torch."),
        device=str(t.device),
        requires_grad=t.requires_grad,
    )


def tensor_header_str(t: Tensor) -> str:
    summary = tensor_summary(t)
    return (
        f"Tensor(sizes={summary['sizes']}, dtype={summary['dtype']}, "
        f"device={summary['device']}, requires_grad={summary['requires_grad']})"
    )


def tensor_full_str(t: Tensor) -> str:
    # Can be large, and reading values of an accelerator tensor synchronises it
    return str(t)


def sizes_str(sizes: Sizes) -> str:
    return str([int(s) for s in sizes])


def tensor_values_str(t: Tensor) -> str:
    """
    Format a tensor with PyTorch's own printer but keep only the values.

    The ``tensor(`` wrapper and the trailing metadata keywords (dtype, device,
    requires_grad, grad_fn, ...) are removed, and continuation lines lose the
    indent that the wrapper introduced.

    Args:
        t: Tensor to format

    Returns:
        The value part of ``str(t)``, e.g. ``"[[1., 2.],\\n [3., 4.]]"``
    """
    text = str(t)
    # Parameters are printed as "Parameter containing:\ntensor(...)"
    start = text.find(TENSOR_PREFIX)
    if start < 0:
        return text

    body = text[start + len(TENSOR_PREFIX):].removesuffix(")")
    metadata = METADATA_KEYWORD.search(body)
    if metadata:
        body = body[: metadata.start()]

    indent = " " * len(TENSOR_PREFIX)
    lines = body.split("\n")
    return "\n".join([lines[0]] + [line.removeprefix(indent) for line in lines[1:]])


def scalar_to_string(s: Shaped[Tensor, ""], precision: int = DEFAULT_ARGS.scalar_precision) -> str:
    """
    Render the value of a 0-d tensor as a decimal string.

    Uses ``%g``-style formatting, independent of the current locale, so that
    3.5 renders as "3.5" and 0.1 stored as float32 renders as "0.1".
    """
    return format(s.item(), f".{precision}g")


def render_tensor_values_compact(
    x: Shaped[Tensor, "..."],
    axis_limit: int,
    precision: int = DEFAULT_ARGS.scalar_precision,
) -> str:
    """
    Render tensor values as nested, comma-separated brackets with no spaces.

    Only the innermost axis is capped: a 1-d tensor longer than ``axis_limit``
    shows its first ``axis_limit`` values followed by ",...". Every index of
    the outer axes is rendered.

    Args:
        x: Detached tensor in host memory
        axis_limit: Maximum number of values rendered along the innermost axis
        precision: Significant digits per scalar

    Returns:
        A string such as "[[1,2,...],[3,4,...]]"
    """
    if axis_limit < 1:
        raise ValueError(f"axis_limit must be at least 1, got {axis_limit}")

    def render(t: Tensor) -> str:
        if t.dim() == 0:
            return scalar_to_string(t, precision)

        length = t.size(0)
        n = min(length, axis_limit) if t.dim() == 1 else length

        out = "[" + ",".join(render(t.select(0, i)) for i in range(n))
        if n < length:
            out += TRUNCATION_MARKER
        return out + "]"

    return render(x)


def preview_axis_limit(sizes: Sizes, budget: int = DEFAULT_ARGS.element_budget) -> int:
    """Split ``budget`` across all innermost rows so the total printed stays near it."""
    sizes = list(sizes)
    if len(sizes) <= 1:
        return budget
    rows = max(1, math.prod(sizes[:-1]))
    return max(1, budget // rows)


def narrow_to_first_region(x: Shaped[Tensor, "..."], budget: int = DEFAULT_ARGS.element_budget) -> Shaped[Tensor, "..."]:
    """
    Keep only the leading rows of ``x`` so that at most ``budget`` innermost
    rows remain.

    Outer axes are narrowed from the outermost inwards, each keeping
    ``budget // rows_inside_it`` indices (at least one). A (100000, 2) tensor
    keeps (32, 2) and a (3, 100, 4) tensor keeps (1, 32, 4). The innermost
    axis is left to the renderer's cap.
    """
    for d in range(x.dim() - 1):
        rows_inside = max(1, math.prod(x.shape[d + 1:-1]))
        keep = max(1, budget // rows_inside)
        if x.size(d) > keep:
            x = x.narrow(d, 0, keep)
    return x


def tensor_first_slice_str(t: Tensor, args: Optional[DebugArgs] = None) -> str:
    """
    Compact preview of the leading values followed by the header.

    Args:
        t: Tensor to preview, on any device and with or without autograd history
        args: Formatting configuration, module defaults when None

    Returns:
        "first=<values> Tensor(...)", or "first=<empty> Tensor(...)" when
        the tensor holds no elements
    """
    args = args or DEFAULT_ARGS
    header = tensor_header_str(t)

    if t.numel() == 0:
        return f"first={EMPTY_MARKER} {header}"

    axis_limit = preview_axis_limit(t.shape, args.element_budget)

    x = narrow_to_first_region(t.detach(), args.element_budget)
    if x.device.type != "cpu":
        logger.debug("copying tensor of shape %s from %s to host for preview", list(x.shape), x.device)
        x = x.cpu()

    values = render_tensor_values_compact(x, axis_limit, args.scalar_precision)
    return f"first={values} {header}"
