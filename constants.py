import torch

DEVICE = (
    "cuda"
    if torch.cuda.is_available()
    else "mps"
    if torch.mps.is_available()
    else "cpu"
)
ELEMENT_BUDGET = 32
SCALAR_PRECISION = 6
NULL_TENSOR_ERROR = "Error: Tensor is null"
EMPTY_MARKER = "<empty>"
TRUNCATION_MARKER = ",..."
