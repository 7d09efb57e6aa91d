"""备件计算模块 - Spares Calculator"""

from __future__ import annotations

from typing import Dict, Iterable

from loguru import logger

from ..schemas import PartRecord, PartsCollection


def compute_spares(parts: Iterable[PartRecord]) -> PartsCollection:
    """筛选需要备件的配件，保持原有顺序

    Args:
        parts: 配件集合或任意 PartRecord 可迭代对象，不会被修改

    Returns:
        新的 PartsCollection，仅包含 needs_spare 为 True 的记录；空输入返回空集合
    """
    spares = [part for part in parts if part.needs_spare is True]
    logger.debug("selected {} spare(s)", len(spares))
    return PartsCollection.of(spares)


def spares_by_name(parts: Iterable[PartRecord]) -> Dict[str, str]:
    """备件名称到描述的映射，同名时后者覆盖前者"""
    return {part.name: part.description for part in compute_spares(parts)}
