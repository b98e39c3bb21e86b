import pytest

from graphcore.cli import main


def test_main_reports_graph(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Graph object created" in out
    assert "0 nodes" in out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2