import pytest
import torch
from torch_util.view import format_tensor_block, main, named_tensors
from torch_util.args import DebugArgs


class TestNamedTensors:

    def test_bare_tensor(self):
        x = torch.ones(2)
        assert named_tensors(x) == [("tensor", x)]

    def test_mapping_skips_non_tensors(self):
        a = torch.ones(2)
        result = named_tensors({"a": a, "step": 5})

        assert [name for name, _ in result] == ["a"]

    def test_sequence_named_by_index(self):
        result = named_tensors([torch.ones(1), torch.zeros(1)])

        assert [name for name, _ in result] == ["0", "1"]

    def test_unsupported_object(self):
        assert named_tensors(42) == []


class TestFormatTensorBlock:

    def test_block_contents(self):
        block = format_tensor_block("w", torch.arange(3.0), DebugArgs())

        assert block.splitlines() == [
            "=== w ===",
            "  header: Tensor(sizes=[3], dtype=float32, device=cpu, requires_grad=False)",
            "  shape: [3]",
            "  preview: first=[0,1,2] Tensor(sizes=[3], dtype=float32, device=cpu, requires_grad=False)",
        ]

    def test_block_with_values(self):
        x = torch.arange(3.0)
        block = format_tensor_block("w", x, DebugArgs(), show_values=True)

        assert block.endswith(str(x))


class TestMain:

    @pytest.fixture
    def saved(self, tmp_path):
        path = tmp_path / "tensors.pt"
        torch.save({"a": torch.arange(3.0), "b": 5}, path)
        return path

    def test_main_prints_tensors(self, saved, capsys):
        assert main([str(saved)]) == 0

        out = capsys.readouterr().out
        assert "=== a ===" in out
        assert "first=[0,1,2]" in out
        assert "=== b ===" not in out

    def test_main_values(self, saved, capsys):
        assert main([str(saved), "--values"]) == 0

        assert "tensor([0., 1., 2.])" in capsys.readouterr().out

    def test_main_budget(self, saved, capsys):
        assert main([str(saved), "--budget", "2"]) == 0

        assert "first=[0,1,...]" in capsys.readouterr().out

    def test_main_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.pt")]) == 1
