from seamcarve.bitmap import Bitmap, Pixel
from seamcarve.cli import OUTPUT_NAME, SEAM_COUNT, main


def write_image(path, width, height):
    rows = [[Pixel((j * 7) % 256, (i * 40) % 256, 0) for j in range(width)] for i in range(height)]
    Bitmap(rows).save(path)


def test_no_arguments_reports_error(capsys):
    assert main([]) == 1
    assert "Error: Need at least one image to carve." in capsys.readouterr().out


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "absent.bmp")]) == 1
    assert "could not be opened" in capsys.readouterr().err
    assert not (tmp_path / OUTPUT_NAME).exists()


def test_not_a_bitmap(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "junk.bmp"
    source.write_bytes(b"XX not an image")
    assert main([str(source)]) == 1
    assert "not in proper BMP format" in capsys.readouterr().err


def test_image_too_narrow(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "narrow.bmp"
    write_image(source, SEAM_COUNT, 2)
    assert main([str(source)]) == 1
    assert not (tmp_path / OUTPUT_NAME).exists()


def test_carves_image(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "wide.bmp"
    write_image(source, SEAM_COUNT + 3, 2)
    assert main([str(source)]) == 0

    result = Bitmap()
    result.open(tmp_path / OUTPUT_NAME)
    pixels = result.to_pixel_matrix()
    assert len(pixels) == 2
    assert all(len(row) == 3 for row in pixels)


def test_source_left_untouched(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "wide.bmp"
    write_image(source, SEAM_COUNT + 1, 2)
    before = source.read_bytes()
    assert main([str(source)]) == 0
    assert source.read_bytes() == before