"""Data 模块：自行车配置仓库"""

from .repository import BikeConfigRepository

__all__ = ["BikeConfigRepository"]
