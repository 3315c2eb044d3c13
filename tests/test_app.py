from tilecrawl.app import main

VALID_MAP = "11111\n1PCE1\n11111\n"


def test_no_arguments_does_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_too_many_arguments_does_nothing(capsys):
    assert main(["a.ber", "b.ber"]) == 0
    assert capsys.readouterr().out == ""


def test_missing_map_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out.startswith("Error:\n")


def test_non_rectangular_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1PCE1\n1111\n")
    assert main([str(path)]) == 1
    assert "Map is not a rectangle" in capsys.readouterr().out


def test_map_without_walls(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "Map not surrounded by walls" in capsys.readouterr().out


def test_unreachable_exit(tmp_path, capsys):
    path = tmp_path / "closed.ber"
    path.write_text("111111\n1PC1E1\n111111\n")
    assert main([str(path)]) == 1
    assert "No possible exit" in capsys.readouterr().out


def test_wrong_points(tmp_path, capsys):
    path = tmp_path / "points.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    assert "Wrong number of points or incorrect characters" in capsys.readouterr().out


def test_valid_map_without_sprites(tmp_path, monkeypatch, capsys):
    path = tmp_path / "ok.ber"
    path.write_text(VALID_MAP)
    monkeypatch.chdir(tmp_path)
    assert main([str(path)]) == 1
    assert "cannot load sprites" in capsys.readouterr().out