from abc import ABC, abstractmethod
from typing import Any


class AnalyticsSinkPort(ABC):
    @abstractmethod
    def append(self, event: dict[str, Any]) -> None:
        raise NotImplementedError
