from torch_util.args import DebugArgs
from torch_util.debug_print import dbg, dbg_tensor, dbgp
from torch_util.formatting import (
    render_tensor_values_compact,
    scalar_to_string,
    sizes_str,
    tensor_first_slice_str,
    tensor_full_str,
    tensor_header_str,
    tensor_values_str,
)
from torch_util.options import f32_cuda
from torch_util.watch import ps, pt, ptf, ptv
