import pytest
import torch
from torch_util.args import DebugArgs
from torch_util.debug_print import dbg, dbg_tensor, dbgp
from torch_util.options import f32_cuda


class TestDbg:

    def test_dbg_tensor_values_only(self):
        assert dbg_tensor(torch.tensor([1, 2, 3], dtype=torch.int16)) == "[1, 2, 3]"

    def test_dbg_sizes(self):
        assert dbg(torch.Size([3, 4])) == "[3, 4]"


class TestDbgp:

    def test_dbgp_tensor_with_name(self, capsys):
        dbgp(torch.tensor([1.0, 2.0]), "x")

        assert capsys.readouterr().out == "x:\n[1., 2.]\n"

    def test_dbgp_tensor_without_name(self, capsys):
        dbgp(torch.tensor([1.0, 2.0]))

        assert capsys.readouterr().out == "[1., 2.]\n"

    def test_dbgp_shape_with_name(self, capsys):
        dbgp(torch.Size([2, 3]), "shape")

        assert capsys.readouterr().out == "shape: [2, 3]\n"

    def test_dbgp_shape_without_name(self, capsys):
        dbgp([4, 5])

        assert capsys.readouterr().out == "[4, 5]\n"


class TestF32Cuda:

    def test_f32_cuda_options(self):
        options = f32_cuda()

        assert options["dtype"] == torch.float32
        assert options["device"].type == "cuda"

    @pytest.mark.skipif(not torch.cuda.is_available(), reason="CUDA not available")
    def test_f32_cuda_factory(self):
        x = torch.zeros(3, **f32_cuda())

        assert x.is_cuda
        assert x.dtype == torch.float32


class TestDebugArgs:

    def test_defaults(self):
        args = DebugArgs()

        assert args.element_budget == 32
        assert args.scalar_precision == 6

    @pytest.mark.parametrize("kwargs", [
        {"element_budget": 0},
        {"scalar_precision": 0},
    ])
    def test_rejects_non_positive(self, kwargs):
        with pytest.raises(ValueError):
            DebugArgs(**kwargs)
