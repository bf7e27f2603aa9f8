import logging

import torch
import triton
import triton.language as tl

from fast_rsqrt import runtime
from fast_rsqrt.ops.q_rsqrt import MAGIC

logger = logging.getLogger(__name__)


@triton.autotune(configs=runtime.get_tuned_config("q_rsqrt"), key=["n_elements"])
@triton.jit
def q_rsqrt_kernel(X, Y, n_elements, MAGIC: tl.constexpr, BLOCK_SIZE: tl.constexpr):
    pid = tl.program_id(0)
    offsets = pid * BLOCK_SIZE + tl.arange(0, BLOCK_SIZE)
    mask = offsets < n_elements

    x = tl.load(X + offsets, mask=mask, other=1.0).to(tl.float32)
    x2 = x * 0.5
    i = x.to(tl.int32, bitcast=True)
    i = MAGIC - (i >> 1)
    y = i.to(tl.float32, bitcast=True)
    y = y * (1.5 - (x2 * y * y))
    tl.store(Y + offsets, y.to(Y.dtype.element_ty), mask=mask)


def _result_dtype(A):
    if A.is_floating_point():
        return A.dtype
    return torch.float32


def _q_rsqrt_torch(A, out_dtype):
    x = A.to(torch.float32)
    x2 = x * 0.5
    i = x.view(torch.int32)
    i = MAGIC - (i >> 1)
    y = i.view(torch.float32)
    y = y * (1.5 - (x2 * y * y))
    return y.to(out_dtype)


def _q_rsqrt_triton(A, out_dtype):
    x = A.contiguous() if A.is_floating_point() else A.to(torch.float32).contiguous()
    out = torch.empty(x.shape, dtype=out_dtype, device=x.device)
    n_elements = x.numel()
    if n_elements == 0:
        return out
    grid = lambda meta: (triton.cdiv(n_elements, meta["BLOCK_SIZE"]),)
    with torch.cuda.device(x.device):
        q_rsqrt_kernel[grid](x, out, n_elements, MAGIC=MAGIC)
    return out


def rsqrt(A):
    logger.debug("FAST_RSQRT RSQRT")
    out_dtype = _result_dtype(A)
    if A.device.type == "cuda":
        return _q_rsqrt_triton(A, out_dtype)
    return _q_rsqrt_torch(A, out_dtype)


def rsqrt_(A):
    logger.debug("FAST_RSQRT RSQRT_")
    assert A.is_floating_point(), "In-place rsqrt requires a floating point tensor"
    A.copy_(rsqrt(A))
    return A
