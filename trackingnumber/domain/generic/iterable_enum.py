from enum import Enum


class IterableEnum(Enum):

    @classmethod
    def map(cls):
        return iter([(i.name, i.value) for i in cls])

    @classmethod
    def names(cls) -> list[str]:
        return [i.name for i in cls]
