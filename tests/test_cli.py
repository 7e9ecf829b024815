import pytest
from PIL import Image

from img2ascii.cli import build_parser, main, parse_options, usage


def test_parse_empty_filename_options():
    args = build_parser().parse_args([])
    with pytest.raises(ValueError):
        parse_options(args)


def test_parse_options():
    args = build_parser().parse_args(
        ["-f", "filename", "-r", "0.5", "-s=false", "-c=false", "-g", "100", "-w", "100"]
    )
    options = parse_options(args)
    assert options.ratio == 0.5
    assert options.fit_screen is False
    assert options.colored is False
    assert options.fixed_width == 100
    assert options.fixed_height == 100
    assert options.reversed is False


def test_defaults():
    options = parse_options(build_parser().parse_args(["-f", "x.png"]))
    assert options.ratio == 1
    assert options.fixed_width == -1
    assert options.fixed_height == -1
    assert options.fit_screen is True
    assert options.colored is True
    assert options.stretched_screen is False


def test_bare_boolean_flags_turn_on():
    options = parse_options(build_parser().parse_args(["-f", "x.png", "-i", "-t"]))
    assert options.reversed is True
    assert options.stretched_screen is True


def test_invalid_boolean_is_rejected():
    with pytest.raises(SystemExit) as raised:
        build_parser().parse_args(["-f", "x.png", "-c=maybe"])
    assert raised.value.code == 2


def test_usage(capsys):
    usage()
    err = capsys.readouterr().err
    assert "Usage: img2ascii" in err
    assert "-f" in err


def test_main_without_filename_prints_usage(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert captured.out == ""


def test_main_prints_ascii(tmp_path, capsys):
    path = tmp_path / "white.png"
    Image.new("RGB", (3, 2), (255, 255, 255)).save(path)
    assert main(["-f", str(path), "-s=false", "-c=false"]) == 0
    assert capsys.readouterr().out == "@@@\n@@@\n"


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.png"), "-s=false"]) == 1
    assert "open image failed" in capsys.readouterr().err