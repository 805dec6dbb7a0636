from __future__ import annotations

from randomimageprint.app import cli


def test_list_encodings(capsys):
    assert cli.main(["--list-encodings"]) == 0
    assert capsys.readouterr().out.split() == ["escpos", "timini"]


def test_requires_a_source(capsys):
    assert cli.main([]) == 2
    assert "Missing image path" in capsys.readouterr().err


def test_rejects_path_and_directory(tmp_path, capsys):
    assert cli.main(["x.png", "--from-dir", str(tmp_path)]) == 2
    assert "not both" in capsys.readouterr().err


def test_markup_needs_output(tmp_path):
    assert cli.main(["x.png", "--markup"]) == 2


def test_prints_file_to_output(tmp_path, gradient_image):
    image = tmp_path / "in.png"
    gradient_image.save(image)
    out = tmp_path / "job.bin"
    assert cli.main([str(image), "--output", str(out), "--width", "64", "--band-height", "16"]) == 0
    data = out.read_bytes()
    assert data.startswith(bytes([0x1B, 0x40, 0x1D, 0x76, 0x30, 0x00, 8, 0, 16, 0]))


def test_random_directory_markup(image_dir, tmp_path):
    out = tmp_path / "job.txt"
    code = cli.main(["--from-dir", str(image_dir), "--output", str(out), "--markup", "--width", "32"])
    assert code == 0
    lines = out.read_text(encoding="ascii").splitlines()
    assert lines and all(line.startswith("<img>") for line in lines)


def test_empty_directory_is_an_error(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert cli.main(["--from-dir", str(empty), "--output", str(tmp_path / "o.bin")]) == 2
    assert "No images found" in capsys.readouterr().err


def test_invalid_width_is_reported(tmp_path, gradient_image, capsys):
    image = tmp_path / "in.png"
    gradient_image.save(image)
    assert cli.main([str(image), "--output", str(tmp_path / "o.bin"), "--width", "0"]) == 2
    assert "Target width" in capsys.readouterr().err


def test_default_device_from_environment(monkeypatch):
    monkeypatch.setenv(cli.DEVICE_ENV_VAR, "/dev/ttyUSB3")
    assert cli.default_device() == "/dev/ttyUSB3"
    monkeypatch.delenv(cli.DEVICE_ENV_VAR)
    assert cli.default_device() == cli.DEFAULT_DEVICE


def test_rejects_unsupported_image_type(tmp_path, gradient_image, capsys):
    image = tmp_path / "photo.gif"
    gradient_image.save(image)
    out = tmp_path / "job.bin"
    assert cli.main([str(image), "--output", str(out), "--width", "16"]) == 2
    assert "Supported formats" in capsys.readouterr().err
    assert not out.exists()
