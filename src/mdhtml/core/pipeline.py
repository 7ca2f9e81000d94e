"""Conversion entry points: text -> HTML, and file -> file orchestration"""

import logging
from pathlib import Path

from mdhtml.core.render import render
from mdhtml.core.segment import segment


logger = logging.getLogger(__name__)


class ConversionError(RuntimeError):
    """Base class for I/O failures around a conversion."""


class SourceReadError(ConversionError):
    """The markdown source could not be read."""


class OutputWriteError(ConversionError):
    """The output directory or file could not be written."""


def convert(text: str) -> str:
    """Convert a markdown document to HTML. Never raises on text input."""
    blocks = segment(text)
    logger.debug("segmented %d block(s)", len(blocks))
    return render(blocks)


def read_source(path: Path) -> str:
    """Read a UTF-8 markdown file, raising SourceReadError on any failure."""
    if not path.is_file():
        raise SourceReadError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed to read {path}: {e}") from e


def write_output(html: str, output_dir: Path, filename: str) -> Path:
    """Write html to output_dir/filename, creating output_dir if needed."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Failed to create output directory {output_dir}: {e}") from e

    out_file = output_dir / filename
    try:
        out_file.write_text(html, encoding='utf-8')
    except OSError as e:
        raise OutputWriteError(f"Failed to write {out_file}: {e}") from e
    return out_file


def run_convert(input_path: Path, output_dir: Path, filename: str) -> tuple[Path, int]:
    """Read input_path, convert, and write the result. Returns (out_file, bytes_written)."""
    text = read_source(input_path)
    logger.info("read %d chars from %s", len(text), input_path)
    result = convert(text)
    out_file = write_output(result, output_dir, filename)
    written = len(result.encode('utf-8'))
    logger.info("wrote %d bytes to %s", written, out_file)
    return out_file, written
