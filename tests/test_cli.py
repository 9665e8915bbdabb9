import pytest

from algos.cli import main


def test_main_runs_archer(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "v: [10, 20, 30]"
    assert len(lines) == 2
    assert lines[1].startswith("v: [10, 20, 30, ")


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2