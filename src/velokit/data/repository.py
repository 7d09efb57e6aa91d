"""自行车配置仓库 - Bike Configuration Repository"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..bicycle import Bicycle
from ..errors import UnknownBikeError
from ..schemas import BikeConfig


class BikeConfigRepository:
    """
    自行车配置仓库 - Bike Configuration Repository

    从 JSON 文件加载具名的自行车配置，加载时即校验每个配件描述。
    Loads named bike configurations from a JSON file and validates every
    part descriptor on load.
    """

    def __init__(self, data_path: Path):
        self.data_path = data_path
        self._bikes: List[BikeConfig] = []
        self.reload()

    def reload(self) -> None:
        with self.data_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        self._bikes = [BikeConfig.model_validate(item) for item in raw.get("bikes", [])]
        logger.info("loaded {} bike config(s) from {}", len(self._bikes), self.data_path)

    def all_bikes(self) -> List[BikeConfig]:
        return self._bikes

    def names(self) -> List[str]:
        return [bike.name for bike in self._bikes]

    def find_by_name(self, name: str) -> Optional[BikeConfig]:
        for bike in self._bikes:
            if bike.name == name:
                return bike
        return None

    def build_bicycle(self, name: str) -> Bicycle:
        config = self.find_by_name(name)
        if config is None:
            raise UnknownBikeError(name)
        return Bicycle.from_config(config.size, config.parts)
