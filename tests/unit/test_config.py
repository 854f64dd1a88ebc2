import pytest

from robustshamir.config import ReconstructCfg, load_cfg


def test_cfg_serialization():
    orig = ReconstructCfg(workers=4, chunk_size=16)
    result = ReconstructCfg.from_json(orig.to_json())
    assert orig == result


def test_cfg_defaults():
    assert ReconstructCfg.from_json("{}") == ReconstructCfg()


@pytest.mark.parametrize(("workers", "chunk_size"), [(0, 1), (1, 0), (-2, 8)])
def test_invalid_cfg(workers, chunk_size):
    with pytest.raises(ValueError):
        ReconstructCfg(workers=workers, chunk_size=chunk_size)


def test_load_cfg(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text('{"workers": 2}')
    assert load_cfg(path) == ReconstructCfg(workers=2)
