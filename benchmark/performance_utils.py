import time
from typing import Generator, List, Optional

import torch
import triton

import fast_rsqrt

from .attri_util import (
    DEFAULT_SHAPES,
    FLOAT_DTYPES,
    BenchmarkMetrics,
    BenchmarkResult,
    BenchMode,
)
from .conftest import Config, record_result

device = fast_rsqrt.device


def synchronize():
    if device == "cuda":
        torch.cuda.synchronize()


class Benchmark:
    device: str = device
    DEFAULT_DTYPES = FLOAT_DTYPES
    DEFAULT_SHAPES = DEFAULT_SHAPES
    """
    the base class for the operations benchmark
    """

    def __init__(self, op_name, torch_op, fast_op, dtypes=None, shapes=None):
        self.op_name = op_name
        self.torch_op = torch_op
        self.fast_op = fast_op
        self.dtypes = dtypes if dtypes is not None else self.DEFAULT_DTYPES
        self.shapes = shapes if shapes is not None else self.DEFAULT_SHAPES
        self.to_bench_dtypes = self.dtypes

    def set_dtypes(self, user_desired_dtypes: Optional[List[torch.dtype]]):
        if user_desired_dtypes and not all(
            dtype in self.dtypes for dtype in user_desired_dtypes
        ):
            invalid_dtypes = [
                dtype for dtype in user_desired_dtypes if dtype not in self.dtypes
            ]
            raise ValueError(
                f"Given dtype(s) '{', '.join(str(dtype) for dtype in invalid_dtypes)}'"
                f"can't be supported by this op '{self.op_name}'"
            )
        self.to_bench_dtypes = user_desired_dtypes or self.dtypes

    def get_input_iter(self, dtype) -> Generator:
        for shape in self.shapes:
            inp = torch.empty(shape, dtype=torch.float32, device=self.device)
            yield inp.uniform_(0.01, 100.0).to(dtype)

    def get_latency(self, op, *args, **kwargs):
        fn = lambda: op(*args, **kwargs)
        if Config.mode == BenchMode.KERNEL:
            latency = triton.testing.do_bench(
                fn,
                warmup=Config.warm_up,
                rep=Config.repetition,
                return_mode="median",
            )
        elif Config.mode == BenchMode.OPERATOR:
            for i in range(Config.warm_up):
                fn()
            synchronize()
            start = time.time()
            for i in range(Config.repetition):
                fn()
            synchronize()
            end = time.time()
            latency = (end - start) / Config.repetition * 1000
        else:
            raise ValueError("Undefined Value of Benchmark Mode.")
        # average latency in ms
        return latency

    def get_max_rel_error(self, inp):
        ref = self.torch_op(inp.to(torch.float64))
        res = self.fast_op(inp).to(torch.float64)
        return ((res - ref).abs() / ref.abs()).max().item()

    def run(self):
        self.set_dtypes(Config.user_desired_dtypes)
        results = []
        for dtype in self.to_bench_dtypes:
            metrics = []
            for inp in self.get_input_iter(dtype):
                metric = BenchmarkMetrics()
                metric.shape_detail = tuple(inp.shape)
                metric.latency_base = self.get_latency(self.torch_op, inp)
                metric.latency = self.get_latency(self.fast_op, inp)
                metric.speedup = metric.latency_base / metric.latency
                metric.max_rel_error = self.get_max_rel_error(inp)
                metrics.append(metric)
            result = BenchmarkResult(
                op_name=self.op_name,
                dtype=str(dtype),
                mode=Config.mode.value,
                result=metrics,
            )
            print(result)
            record_result(result)
            results.append(result)
        return results
