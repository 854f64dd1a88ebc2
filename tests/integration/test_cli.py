import json

from robustshamir.cli import main
from robustshamir.reconstruct import robust_reconstruct
from robustshamir.shares import load_shares


def test_recover_text(share_file, capsys):
    assert main(["recover", str(share_file)]) == 0
    assert capsys.readouterr().out == "secret=5\nwrong_share_indices=[3]\n"


def test_recover_json(share_file, capsys):
    assert main(["recover", str(share_file), "--format", "json", "--workers", "2"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["secret"] == 5
    assert result["wrong_indices"] == [3]


def test_recover_table(share_file, capsys):
    assert main(["recover", str(share_file), "--format", "table"]) == 0
    out = capsys.readouterr().out
    assert "Secret: 5" in out
    assert "wrong" in out


def test_recover_with_config(share_file, tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"workers": 2, "chunk_size": 1}')
    assert main(["recover", str(share_file), "--config", str(cfg)]) == 0
    assert capsys.readouterr().out.startswith("secret=5\n")


def test_recover_failure(share_file, capsys):
    assert main(["recover", str(share_file), "-k", "5"]) == 1
    assert "Not enough shares" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["recover", str(tmp_path / "nope.json")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_split(capsys):
    assert main(["split", "-k", "2", "-n", "4", "--base", "16", "--corrupt", "2"]) == 0
    captured = capsys.readouterr()
    points, k = load_shares(json.loads(captured.out))
    result = robust_reconstruct(points, k)
    assert f"secret={result.secret}" in captured.err
    assert result.wrong_indices == (2,)
