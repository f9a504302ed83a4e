from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class BaseFeed(ABC, Generic[T]):
    """Uma fonte: fetch() devolve os itens normalizados, ou [] se a fonte falhar."""

    @abstractmethod
    def fetch(self) -> List[T]:
        pass
