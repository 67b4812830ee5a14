import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from present_ai.models import Custom, FormState, GiftIdea, Preset


@pytest.fixture
def form() -> FormState:
    return FormState(
        name="Priya",
        age="29",
        gender="Female",
        relationship=Preset(value="Sibling"),
        hobbies="painting, football",
        personality=Custom(text="Quietly competitive"),
        budget="50",
        currency="EUR",
        occasion=Preset(value="Birthday"),
    )


@pytest.fixture
def socks() -> GiftIdea:
    return GiftIdea(name="Socks", appropriateness="Warm", relation="Likes comfort", priceRange="10-20 EUR")
