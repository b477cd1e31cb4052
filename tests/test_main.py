import numpy as np
from PIL import Image

from rawquant.main import main

from conftest import solid_image


def test_writes_output_image(gray128_4x4, write_raw, tmp_path, capsys):
    src = write_raw(gray128_4x4)
    out = tmp_path / "out.png"

    code = main([str(src), "0.5", "1", "-1", "--width", "4", "--height", "4", "-o", str(out)])

    assert code == 0
    with Image.open(out) as im:
        assert im.size == (2, 2)
        arr = np.array(im.convert("RGB"))
    assert arr[0, 0].tolist() == [192, 192, 192]
    assert arr[1, 1].tolist() == [64, 64, 64]
    printed = capsys.readouterr().out
    assert "Red values found:" in printed
    assert "Wrote image:" in printed


def test_default_mode_resolves_pivot(write_raw, capsys):
    src = write_raw(solid_image(10, 10, 60))
    assert main([str(src), "1.0", "2", "--width", "10", "--height", "10"]) == 0
    assert "Pivot calculated: 60" in capsys.readouterr().out


def test_missing_input_file(tmp_path, capsys):
    code = main([str(tmp_path / "none.rgb"), "0.5", "2", "-1"])
    assert code == 1
    assert "Error opening file" in capsys.readouterr().out


def test_strict_truncated_input(tmp_path, capsys):
    src = tmp_path / "short.rgb"
    src.write_bytes(bytes(10))
    code = main([str(src), "1.0", "2", "-1", "--width", "4", "--height", "4", "--strict"])
    assert code == 1
    assert "Truncated input" in capsys.readouterr().out


def test_bad_arguments(write_raw, gray128_4x4, capsys):
    src = str(write_raw(gray128_4x4))
    assert main([src, "0.5", "9", "-1"]) == 2
    assert main([src, "0", "2", "-1"]) == 2
    assert main([src, "0.5", "2", "300"]) == 2
    assert main([src, "0.5", "2", "-1", "--width", "0"]) == 2
    assert "Argument error" in capsys.readouterr().out


def test_scale_too_small_for_image(write_raw, gray128_4x4, capsys):
    src = str(write_raw(gray128_4x4))
    code = main([src, "0.1", "2", "-1", "--width", "4", "--height", "4"])
    assert code == 2
    out = capsys.readouterr().out
    assert "Argument error" in out
    assert "Image:" not in out


def test_pivot_and_levels_printed_once(write_raw, capsys):
    src = write_raw(solid_image(10, 10, 60))
    assert main([str(src), "1.0", "2", "--width", "10", "--height", "10"]) == 0
    captured = capsys.readouterr()
    assert (captured.out + captured.err).count("Pivot calculated") == 1
    assert (captured.out + captured.err).count("Red values found") == 1
