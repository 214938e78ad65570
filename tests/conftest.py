import pytest

from local_xy import LocalXyWgs84Util

@pytest.fixture
def util():
    return LocalXyWgs84Util(29.4497, -98.6122, 0.0, 250.0, "map")
