"""Image thumbnailing and statistics for folders of JPG and PNG files."""

from __future__ import annotations

import argparse
import math
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from PIL import Image

PathLike = Union[str, Path]

_IMAGE_EXTENSIONS = frozenset({"JPG", "jpg", "PNG", "png"})
_PNG_MODES = frozenset({"1", "L", "LA", "I", "P", "RGB", "RGBA"})


class ImagixError(Exception):
    """Base class for image tool errors."""

    default_message = "Error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class FileIOError(ImagixError):
    """A file or directory could not be read or written."""

    default_message = "Error in File I/O"


class UserInputError(ImagixError):
    """The user supplied an invalid value."""

    default_message = "Error in user input"


class ImageResizingError(ImagixError):
    """An image could not be decoded, scaled or encoded."""

    default_message = "Error in image processing"


class SizeOption(Enum):
    """Target thumbnail sizes; the value is the bounding box edge in pixels."""

    SMALL = 200
    MEDIUM = 400
    LARGE = 800


class Mode(Enum):
    """Whether to resize one file or every image in a folder."""

    SINGLE = "single"
    ALL = "all"


def parse_size_option(text: str) -> SizeOption:
    """Parse a size name; anything unknown falls back to SMALL."""
    return {
        "small": SizeOption.SMALL,
        "medium": SizeOption.MEDIUM,
        "large": SizeOption.LARGE,
    }.get(text, SizeOption.SMALL)


def parse_mode(text: str) -> Mode:
    """Parse a mode name, raising UserInputError for unknown values."""
    try:
        return Mode(text)
    except ValueError:
        raise UserInputError("Wrong value for mode") from None


def format_elapsed(seconds: float) -> str:
    """Render a duration with a unit suited to its magnitude."""
    total = round(seconds * 1_000_000_000)
    secs, nanos = divmod(total, 1_000_000_000)
    if secs == 0:
        if nanos < 1000:
            return f"{nanos} ns"
        if nanos < 1_000_000:
            return f"{nanos // 1000} µs"
        return f"{nanos // 1_000_000} ms"
    if secs < 10:
        return f"{secs}.{nanos // 10_000_000:02} s"
    return f"{secs} s"


def process_resize_request(size: SizeOption, mode: Mode, src_folder: PathLike) -> None:
    """Resize a single image or every image in a folder to ``size``."""
    pixels = size.value
    if mode is Mode.ALL:
        _resize_all(pixels, Path(src_folder))
    else:
        resize_image(pixels, Path(src_folder))


def _resize_all(size: int, src_folder: Path) -> None:
    try:
        entries = get_image_files(src_folder)
    except ImagixError:
        return
    for entry in entries:
        resize_image(size, entry)


def _thumbnail_dimensions(width: int, height: int, size: int) -> tuple[int, int]:
    ratio = min(size / width, size / height)
    new_width = max(math.floor(width * ratio + 0.5), 1)
    new_height = max(math.floor(height * ratio + 0.5), 1)
    return new_width, new_height


def resize_image(size: int, src_path: PathLike) -> Path:
    """Scale an image to fit ``size``x``size`` and write it as PNG under ``tmp/``.

    Returns the path of the written file.
    """
    src_path = Path(src_path)
    if not src_path.name:
        raise UserInputError()
    dest_dir = src_path.parent / "tmp"
    if not dest_dir.exists():
        try:
            dest_dir.mkdir()
        except OSError as exc:
            raise FileIOError() from exc
    dest_path = dest_dir / f"{src_path.stem}.png"

    started = time.perf_counter()
    try:
        with Image.open(src_path) as img:
            img.load()
            width, height = _thumbnail_dimensions(img.width, img.height, size)
            scaled = img.resize((width, height))
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageResizingError() from exc
    if scaled.mode not in _PNG_MODES:
        scaled = scaled.convert("RGBA" if "A" in scaled.getbands() else "RGB")

    try:
        output = open(dest_path, "wb")
    except OSError as exc:
        raise FileIOError() from exc
    with output:
        try:
            scaled.save(output, format="PNG")
        except (OSError, ValueError) as exc:
            raise ImageResizingError() from exc

    elapsed = format_elapsed(time.perf_counter() - started)
    print(
        f"Thumbnailed file: {str(src_path)!r} to size {size}x{size} in {elapsed}. "
        f"Output file in {str(dest_path)!r}"
    )
    return dest_path


def get_image_files(src_folder: PathLike) -> list[Path]:
    """Return the JPG and PNG files (by exact-case extension) directly in a folder."""
    try:
        entries = sorted(Path(src_folder).iterdir())
    except OSError as exc:
        raise UserInputError("Invalid source folder") from exc
    return [entry for entry in entries if entry.suffix[1:] in _IMAGE_EXTENSIONS]


def get_stats(src_folder: PathLike) -> tuple[int, float]:
    """Return the image count and their total size in whole megabytes."""
    image_files = get_image_files(src_folder)
    try:
        total = sum(entry.stat().st_size for entry in image_files)
    except OSError as exc:
        raise FileIOError() from exc
    return len(image_files), float(total // 1_000_000)


def _mode_argument(text: str) -> Mode:
    try:
        return parse_mode(text)
    except UserInputError as exc:
        raise argparse.ArgumentTypeError(exc.message) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resize", description="This is a tool for image resizing and stats"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    resize = commands.add_parser(
        "resize", help="Specify size(small/medium/large) , mode(single/all) and srcfolder"
    )
    resize.add_argument("--size", type=parse_size_option, required=True)
    resize.add_argument("--mode", type=_mode_argument, required=True)
    resize.add_argument("--srcfolder", type=Path, required=True)
    stats = commands.add_parser("stats", help="Specify srcfolder")
    stats.add_argument("--srcfolder", type=Path, required=True)
    return parser


def main(argv=None) -> int:
    """Run the image resize and stats command line."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "resize":
            process_resize_request(args.size, args.mode, args.srcfolder)
            print("Image(s) resized successfully")
        else:
            count, size = get_stats(args.srcfolder)
            print(f"Found {count} image files with aggregate size of {size!r} MB")
    except ImagixError as exc:
        print(exc.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())