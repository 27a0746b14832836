import pytest
from PIL import Image

from sysprog.imagix import (
    ImageResizingError,
    Mode,
    SizeOption,
    UserInputError,
    format_elapsed,
    get_image_files,
    get_stats,
    main,
    parse_mode,
    parse_size_option,
    process_resize_request,
    resize_image,
)


def _make_image(path, size=(1000, 500), fmt=None):
    Image.new("RGB", size, (10, 120, 200)).save(path, format=fmt)
    return path


def test_parse_size_option_known_names():
    assert parse_size_option("small") is SizeOption.SMALL
    assert parse_size_option("medium") is SizeOption.MEDIUM
    assert parse_size_option("large") is SizeOption.LARGE


def test_parse_size_option_defaults_to_small():
    assert parse_size_option("huge") is SizeOption.SMALL


def test_size_option_pixels():
    pixels = [parse_size_option(name).value for name in ("small", "medium", "large")]
    assert pixels == [200, 400, 800]


def test_parse_mode():
    assert parse_mode("single") is Mode.SINGLE
    assert parse_mode("all") is Mode.ALL


def test_parse_mode_rejects_unknown():
    with pytest.raises(UserInputError) as info:
        parse_mode("some")
    assert info.value.message == "Wrong value for mode"


def test_format_elapsed_units():
    assert format_elapsed(0.0000005) == "500 ns"
    assert format_elapsed(0.000123) == "123 µs"
    assert format_elapsed(0.25) == "250 ms"
    assert format_elapsed(2.5) == "2.50 s"


def test_get_image_files_filters_by_extension(tmp_path):
    for name in ["a.jpg", "b.PNG", "c.txt", "d.Jpg", "e.png"]:
        (tmp_path / name).write_bytes(b"x")
    names = {path.name for path in get_image_files(tmp_path)}
    assert names == {"a.jpg", "b.PNG", "e.png"}


def test_get_image_files_invalid_folder(tmp_path):
    with pytest.raises(UserInputError) as info:
        get_image_files(tmp_path / "missing")
    assert info.value.message == "Invalid source folder"


def test_single_resize_writes_png_thumbnail(tmp_path):
    src = _make_image(tmp_path / "image1.jpg", fmt="JPEG")
    process_resize_request(SizeOption.SMALL, Mode.SINGLE, src)
    produced = [path.name for path in get_image_files(tmp_path / "tmp")]
    assert produced == ["image1.png"]
    dest = tmp_path / "tmp" / "image1.png"
    with Image.open(dest) as out:
        out_format = out.format
        width, height = out.size
    assert out_format == "PNG"
    assert max(width, height) == 200
    assert width == 2 * height


def test_resize_image_returns_destination(tmp_path):
    src = _make_image(tmp_path / "pic.png", size=(300, 600))
    dest = resize_image(SizeOption.MEDIUM.value, src)
    assert dest == tmp_path / "tmp" / "pic.png"
    with Image.open(dest) as out:
        width, height = out.size
    assert height == 400
    assert height == 2 * width


def test_resize_all_processes_every_image(tmp_path):
    _make_image(tmp_path / "one.jpg", fmt="JPEG")
    _make_image(tmp_path / "two.png")
    (tmp_path / "notes.txt").write_text("not an image")
    process_resize_request(SizeOption.SMALL, Mode.ALL, tmp_path)
    produced = {path.name for path in (tmp_path / "tmp").iterdir()}
    assert produced == {"one.png", "two.png"}


def test_resize_missing_file_is_resizing_error(tmp_path):
    with pytest.raises(ImageResizingError):
        resize_image(200, tmp_path / "absent.jpg")


def test_resize_corrupt_file_is_resizing_error(tmp_path):
    bad = tmp_path / "broken.jpg"
    bad.write_bytes(b"not really a jpeg")
    with pytest.raises(ImageResizingError):
        process_resize_request(SizeOption.SMALL, Mode.SINGLE, bad)


def test_get_stats_counts_and_megabytes(tmp_path):
    (tmp_path / "big.png").write_bytes(b"\0" * 2_500_000)
    (tmp_path / "skip.txt").write_bytes(b"\0" * 3_000_000)
    count, size = get_stats(tmp_path)
    assert count == 1
    assert size == 2.0


def test_get_stats_invalid_folder(tmp_path):
    with pytest.raises(UserInputError):
        get_stats(tmp_path / "nowhere")


def test_main_stats_output(tmp_path, capsys):
    _make_image(tmp_path / "one.png", size=(10, 10))
    assert main(["stats", "--srcfolder", str(tmp_path)]) == 0
    assert capsys.readouterr().out == (
        "Found 1 image files with aggregate size of 0.0 MB\n"
    )


def test_main_resize_reports_success(tmp_path, capsys):
    src = _make_image(tmp_path / "photo.jpg", fmt="JPEG")
    main(["resize", "--size", "small", "--mode", "single", "--srcfolder", str(src)])
    out = capsys.readouterr().out
    assert out.endswith("Image(s) resized successfully\n")
    assert (tmp_path / "tmp" / "photo.png").exists()


def test_main_reports_invalid_folder(tmp_path, capsys):
    main(["stats", "--srcfolder", str(tmp_path / "missing")])
    assert capsys.readouterr().out == "Invalid source folder\n"


def test_main_rejects_bad_mode(tmp_path):
    with pytest.raises(SystemExit):
        main(["resize", "--size", "small", "--mode", "many", "--srcfolder", str(tmp_path)])