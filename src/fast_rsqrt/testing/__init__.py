import torch

# Largest relative error of one Newton-Raphson step after the 0x5F3759DF
# estimate is about 1.752e-3; narrow dtypes add their own rounding.
RESOLUTION = {
    torch.float16: 3e-3,
    torch.float32: 1.8e-3,
    torch.bfloat16: 0.016,
    torch.float64: 1.8e-3,
}


def assert_close(res, ref, dtype, equal_nan=False, atol=1e-6):
    if dtype is None:
        dtype = torch.float32
    assert res.dtype == dtype
    ref = ref.to(dtype)
    rtol = RESOLUTION[dtype]
    torch.testing.assert_close(res, ref, atol=atol, rtol=rtol, equal_nan=equal_nan)


def assert_equal(res, ref, equal_nan=False):
    torch.testing.assert_close(res, ref, atol=0, rtol=0, equal_nan=equal_nan)
