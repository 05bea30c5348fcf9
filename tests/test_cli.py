import pytest

from hamgrid import fromgrid, togrid, validcoords, validgrid


def test_togrid_prints_humanized_grid(capsys):
    assert togrid.main(["42.895747", "-71.45816", "-p", "10"]) == 0
    assert capsys.readouterr().out == "FN42gv54AX\n"


def test_togrid_default_precision(capsys):
    assert togrid.main(["41.714649", "-72.728485"]) == 0
    assert capsys.readouterr().out == "FN31pr\n"


def test_togrid_plain(capsys):
    assert togrid.main(["42.895747", "-71.45816", "--plain"]) == 0
    assert capsys.readouterr().out == "FN42GV\n"


def test_togrid_rejects_odd_precision(capsys):
    assert togrid.main(["42.895747", "-71.45816", "-p", "5"]) == 2
    assert "even number" in capsys.readouterr().err


def test_togrid_rejects_out_of_range(capsys):
    assert togrid.main(["95", "0"]) == 1
    assert capsys.readouterr().out == ""


def test_fromgrid_prints_center(capsys):
    assert fromgrid.main(["QN16"]) == 0
    assert capsys.readouterr().out == "46.5000000,143.0000000\n"


def test_fromgrid_prints_box(capsys):
    assert fromgrid.main(["QN16", "--box"]) == 0
    assert capsys.readouterr().out == "46.0000000,142.0000000\n47.0000000,144.0000000\n"


def test_fromgrid_rejects_invalid_grid(capsys):
    assert fromgrid.main(["ZN16"]) == 1
    assert "not a valid Maidenhead locator" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("args", "code"),
    [
        (["QN16mm"], 0),
        (["RR00XX99AA00XX99"], 0),
        ([" fn42gv "], 0),
        (["ZN"], 1),
        (["QN16n"], 1),
        ([], 2),
        (["QN16", "FN42"], 2),
    ],
)
def test_validgrid_exit_codes(args, code):
    assert validgrid.main(args) == code


@pytest.mark.parametrize(
    ("args", "code"),
    [
        (["41.714649", "-72.728485"], 0),
        (["90", "180"], 0),
        (["-90.5", "0"], 1),
        (["0", "181"], 1),
    ],
)
def test_validcoords_exit_codes(args, code):
    assert validcoords.main(args) == code


def test_validcoords_bad_arguments_exit_silently(capsys):
    with pytest.raises(SystemExit) as excinfo:
        validcoords.main(["north", "0"])
    assert excinfo.value.code == 2
    assert capsys.readouterr().err == ""
