import json

import pytest

SHARES = {
    "keys": {"n": 4, "k": 2},
    "1": {"base": "10", "value": "7"},
    "2": {"base": "2", "value": "1001"},
    "3": {"base": "16", "value": "3e7"},
    "4": {"base": "36", "value": "d"},
}


@pytest.fixture
def share_file(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(SHARES))
    return path
