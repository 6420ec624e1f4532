import torch


def f32_cuda() -> dict:
    """Factory keyword arguments for float32 CUDA tensors: ``torch.zeros(3, **f32_cuda())``."""
    return {"dtype": torch.float32, "device": torch.device("cuda")}
