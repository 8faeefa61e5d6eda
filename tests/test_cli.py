import logging

import pytest

from conftest import grey_image
from rgbhist.cli import main
from rgbhist.io import read_bmp, write_bmp


@pytest.fixture
def input_bmp(tmp_path, gradient_image):
    path = tmp_path / "in.bmp"
    write_bmp(str(path), gradient_image)
    return path


def test_histogram_command(tmp_path, input_bmp):
    out = tmp_path / "hist.bmp"
    assert main(["histogram", str(input_bmp), str(out)]) == 0
    chart = read_bmp(str(out))
    assert (chart.w, chart.h) == (316, 848)


def test_equalize_command(tmp_path, input_bmp):
    out = tmp_path / "eq.bmp"
    assert main(["equalize", str(input_bmp), str(out)]) == 0
    img = read_bmp(str(out))
    assert (img.w, img.h) == (16, 16)


@pytest.mark.parametrize("strategy", ["fixed_cutout", "two_peaks", "median_grey_level"])
def test_binarize_command(tmp_path, input_bmp, strategy):
    out = tmp_path / f"{strategy}.bmp"
    assert main(["binarize", str(input_bmp), str(out), "--strategy", strategy]) == 0
    img = read_bmp(str(out))
    assert {v for px in img.pixels for v in px} <= {0, 255}


def test_binarize_custom_cutout(tmp_path):
    src = tmp_path / "g.bmp"
    write_bmp(str(src), grey_image([10, 60], 2))
    out = tmp_path / "o.bmp"
    assert main(["binarize", str(src), str(out), "--cutout", "50"]) == 0
    assert read_bmp(str(out)).pixels == [(0, 0, 0), (255, 255, 255)]


def test_unknown_strategy_fails(tmp_path, input_bmp, caplog):
    out = tmp_path / "o.bmp"
    with caplog.at_level(logging.ERROR):
        assert main(["binarize", str(input_bmp), str(out), "-s", "otsu"]) == 1
    assert "otsu" in caplog.text
    assert not out.exists()


def test_degenerate_image_fails(tmp_path):
    src = tmp_path / "flat.bmp"
    write_bmp(str(src), grey_image([100], 1))
    assert main(["equalize", str(src), str(tmp_path / "o.bmp")]) == 1


def test_missing_input_fails(tmp_path):
    assert main(["equalize", str(tmp_path / "nope.bmp"), str(tmp_path / "o.bmp")]) == 1


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])


def test_setup_logging_levels(monkeypatch):
    import rgbhist.cli as cli_module

    captured = {}
    monkeypatch.setattr(cli_module.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    cli_module.setup_logging(verbose=True)
    assert captured["level"] == logging.DEBUG
    cli_module.setup_logging(quiet=True)
    assert captured["level"] == logging.WARNING
    cli_module.setup_logging()
    assert captured["level"] == logging.INFO
    assert captured["format"] == cli_module.LOG_FORMAT
