from typing import Dict, Optional

import pytest

from naming import DefaultNameBuilder, NameNormalizer


class FakeTransliterator:
    """Table-driven transliterator; characters missing from the table have no mapping."""

    def __init__(self, table: Dict[str, str]) -> None:
        self.table = table
        self.calls = []

    def transliterate(self, ch: str) -> Optional[str]:
        self.calls.append(ch)
        return self.table.get(ch)


@pytest.fixture()
def fake_transliterator():
    return FakeTransliterator({"é": "e", "ß": "ss", "北": "Bei ", "京": "Jing ", "\u0301": "", "→": "->"})


@pytest.fixture()
def fake_normalizer(fake_transliterator):
    return NameNormalizer(fake_transliterator)


@pytest.fixture()
def builder():
    return DefaultNameBuilder()
