from typing import List

import pytest

from tttengine.board import Mark


@pytest.fixture
def cells() -> List[Mark]:
    return [Mark.EMPTY] * 9
