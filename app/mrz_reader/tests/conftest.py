import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# ICAO Doc 9303 specimen passport.
ICAO_LINE_1 = "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<"
ICAO_LINE_2 = "L898902C36UTO7408122F1204159ZE184226B<<<<<10"


@pytest.fixture
def icao_line1() -> str:
    return ICAO_LINE_1


@pytest.fixture
def icao_line2() -> str:
    return ICAO_LINE_2
