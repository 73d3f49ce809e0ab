from trackingnumber.domain.generic.iterable_enum import IterableEnum
