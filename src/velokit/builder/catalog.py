"""
配件目录构建模块 - Part Catalog Builder

把声明式的配件描述列表物化为不可变的配件记录集合。
Materialize a declarative list of part descriptors into an immutable parts collection.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Union

from loguru import logger

from ..schemas import PartDescriptor, PartRecord, PartsCollection

DescriptorLike = Union[PartDescriptor, Mapping, tuple, list]


def coerce_descriptor(value: object) -> PartDescriptor:
    """
    规范化单个配件描述 - Normalize One Descriptor

    支持四种输入形态：
    Accepted shapes:
    1. (name, description) 或 (name, description, needs_spare)
    2. {"name": ..., "description": ..., "needs_spare": ...}（也接受 needsSpare）
    3. 已有的 PartDescriptor
    4. 带 name/description 属性的记录对象（如 PartRecord）

    参数 Parameters:
        value: 调用方提供的描述
               Caller-supplied descriptor

    返回 Returns:
        校验后的 PartDescriptor；形态或字段非法时抛出 ValidationError
        Validated PartDescriptor; raises ValidationError on a bad shape or field
    """
    return PartDescriptor.model_validate(value)


def create_part(descriptor: DescriptorLike) -> PartRecord:
    """把一个描述物化为配件记录 - Materialize one descriptor into a PartRecord."""
    checked = coerce_descriptor(descriptor)
    return PartRecord(
        name=checked.name,
        description=checked.description,
        needs_spare=checked.needs_spare,
    )


def build_parts(config: Iterable[DescriptorLike]) -> PartsCollection:
    """
    构建配件集合 - Build Parts Collection

    每个描述生成一条记录，输出长度与顺序和输入一致。
    One record per descriptor; output keeps the input's length and order.

    缺省的 needs_spare 视为 True；name/description 缺失或为空时抛出 ValidationError，
    不会用默认值代替。重复的配件名允许存在，各自独立处理。
    A missing needs_spare resolves to True. A missing or empty name/description
    raises ValidationError and is never substituted. Duplicate names are kept.
    """
    records = [create_part(item) for item in config]
    logger.debug("built {} part record(s)", len(records))
    return PartsCollection.of(records)
