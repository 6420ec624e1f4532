import argparse
import logging
from typing import Optional

import torch
from torch import Tensor

from constants import ELEMENT_BUDGET
from torch_util.args import DebugArgs
from torch_util.log_setup import setup_logging
from torch_util.watch import ps, pt, ptf, ptv

logger = logging.getLogger(__name__)


def named_tensors(loaded: object) -> list[tuple[str, Tensor]]:
    """
    Flatten whatever ``torch.load`` returned into (name, tensor) pairs.

    A bare tensor is named "tensor", mapping entries keep their key and
    list/tuple entries are named by index. Anything else is skipped.
    """
    if isinstance(loaded, Tensor):
        return [("tensor", loaded)]

    if isinstance(loaded, dict):
        items = [(str(key), value) for key, value in loaded.items()]
    elif isinstance(loaded, (list, tuple)):
        items = [(str(i), value) for i, value in enumerate(loaded)]
    else:
        logger.warning(f"nothing to show for an object of type {type(loaded).__name__}")
        return []

    tensors = []
    for name, value in items:
        if isinstance(value, Tensor):
            tensors.append((name, value))
        else:
            logger.warning(f"skipping {name}: {type(value).__name__} is not a tensor")
    return tensors


def format_tensor_block(name: str, t: Tensor, args: DebugArgs, show_values: bool = False) -> str:
    lines = [
        f"=== {name} ===",
        f"  header: {pt(t)}",
        f"  shape: {ps(t)}",
        f"  preview: {ptf(t, args)}",
    ]
    if show_values:
        lines.append(ptv(t))
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print debug views of the tensors stored in a torch.save file",
        epilog="Usage example: tensor-view activations.pt --budget=64 --values"
    )
    parser.add_argument("path", type=str, help="File written by torch.save")
    parser.add_argument("--values", action="store_true", help="Also print the full value dump of every tensor")
    parser.add_argument("--budget", type=int, default=ELEMENT_BUDGET, help="Approximate number of values shown per preview")
    parser.add_argument("--map-location", type=str, default="cpu", help="Device the tensors are loaded onto")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    cli_args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if cli_args.verbose else logging.INFO)

    debug_args = DebugArgs(element_budget=cli_args.budget)

    try:
        loaded = torch.load(cli_args.path, map_location=cli_args.map_location, weights_only=True)
    except FileNotFoundError:
        logger.error(f"no such file: {cli_args.path}")
        return 1

    for name, t in named_tensors(loaded):
        print(format_tensor_block(name, t, debug_args, show_values=cli_args.values))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
