from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import torch

FLOAT_DTYPES = [torch.float16, torch.float32, torch.bfloat16]

DEFAULT_WARMUP_COUNT = 100
DEFAULT_ITER_COUNT = 100

DEFAULT_SHAPES = [
    (1024 * 1024,),
    (64, 64),
    (4096, 4096),
    (64, 512, 512),
]


class BenchMode(Enum):
    KERNEL = "kernel"
    OPERATOR = "operator"


@dataclass
class BenchmarkMetrics:
    # Detailed size info
    shape_detail: Optional[Tuple[int, ...]] = None
    # Latency base in ms
    latency_base: Optional[float] = None
    # Latency in ms
    latency: Optional[float] = None
    # Speedup over baseline
    speedup: Optional[float] = None
    # Largest relative error against the baseline
    max_rel_error: Optional[float] = None


@dataclass
class BenchmarkResult:
    op_name: str
    dtype: str
    mode: str
    result: List[BenchmarkMetrics] = field(default_factory=list)

    def __str__(self) -> str:
        header = (
            f"\nOperator: {self.op_name}  Performance Test (dtype={self.dtype}, mode={self.mode})\n"
            f"{'Status':<12}{'Torch Latency (ms)':>20}{'Fast Latency (ms)':>20}"
            f"{'Speedup':>12}{'Max Rel Err':>14}          Size Detail\n"
            f"{'-' * 110}\n"
        )
        rows = []
        for metric in self.result:
            rows.append(
                f"{'SUCCESS':<12}"
                f"{metric.latency_base:>20.6f}"
                f"{metric.latency:>20.6f}"
                f"{metric.speedup:>12.3f}"
                f"{metric.max_rel_error:>14.3e}"
                f"          {metric.shape_detail}\n"
            )
        return header + "".join(rows)

    def to_dict(self):
        return {
            "op_name": self.op_name,
            "dtype": self.dtype,
            "mode": self.mode,
            "result": [asdict(metric) for metric in self.result],
        }
