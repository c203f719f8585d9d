# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum
from functools import cached_property


def _normalize_enum_value(value: str) -> str:
    """Lowercase the value and convert _ to -."""
    return value.lower().replace("_", "-")


class CaseInsensitiveStrEnum(str, Enum):
    """
    String enum that compares case-insensitively and ignores - vs _ differences,
    so "CPU_CORE", "cpu-core" and "cpu_core" all select the same member.
    """

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False

        normalized_value = self.normalized_value
        if isinstance(other, str):
            return normalized_value == _normalize_enum_value(other)
        if isinstance(other, Enum):
            if isinstance(other.value, str):
                return normalized_value == _normalize_enum_value(other.value)
            return False
        return super().__eq__(str(other))

    def __hash__(self) -> int:
        return hash(self.normalized_value)

    @cached_property
    def normalized_value(self) -> str:
        return _normalize_enum_value(self.value)

    @classmethod
    def _missing_(cls, value):
        """Look up a member by its normalized string value, or return None."""
        if isinstance(value, str):
            normalized_value = _normalize_enum_value(value)
            for member in cls:
                if member == normalized_value:
                    return member
        return None
