import sys
from pathlib import Path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest


SCENARIO_ROWS = [
    {"region": "Africa", "intensity": 3},
    {"region": "Africa", "intensity": 3},
    {"region": "Asia", "intensity": 1},
]


@pytest.fixture
def scenario_rows():
    return [dict(r) for r in SCENARIO_ROWS]


@pytest.fixture
def sample_rows():
    # Shaped like the real dataset: mixed blanks, "" scores, extra keys
    return [
        {"_id": "a1", "topic": "oil", "sector": "Energy", "region": "Northern America",
         "pestle": "Industries", "source": "EIA", "country": "United States of America",
         "intensity": 6, "likelihood": 3, "relevance": 2, "title": "Oil output"},
        {"_id": "a2", "topic": "gas", "sector": "Energy", "region": "Asia",
         "pestle": "Economic", "source": "Reuters", "country": "India",
         "intensity": 2.5, "likelihood": 2, "relevance": 1},
        {"_id": "a3", "topic": "oil", "sector": "", "region": "Asia",
         "pestle": "Industries", "source": "EIA", "country": "",
         "intensity": "", "likelihood": 4, "relevance": ""},
        {"_id": "a4", "topic": "", "sector": "Retail", "region": "",
         "pestle": "Political", "source": "WSJ", "country": "Mexico",
         "intensity": None, "likelihood": None, "relevance": 3},
        {"_id": "a5"},
    ]
