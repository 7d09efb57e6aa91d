"""Builder 模块：配件目录构建与备件计算"""

from .catalog import build_parts, coerce_descriptor, create_part
from .spares import compute_spares, spares_by_name

__all__ = [
    "build_parts",
    "coerce_descriptor",
    "create_part",
    "compute_spares",
    "spares_by_name",
]
