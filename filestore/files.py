import asyncio
import logging
import os

from .config import get_settings
from .errors import MissingArgument, PathNotFound

logger = logging.getLogger(__name__)

COMMENT_MARKERS = ("#", "!")


def _not_found(path, message):
    if get_settings().strict:
        raise PathNotFound(path, message)
    logger.error(message)


def list_by_extension(dir, ext):
    """Returns the names of the files in dir ending with .<ext>, in listing order"""
    if not os.path.exists(dir):
        _not_found(dir, f"The src directory [ {dir} ] does not exist.")
        return None

    suffix = f".{ext}"
    files = [name for name in os.listdir(dir) if name.endswith(suffix)]
    logger.debug("Found %s %s files in %s", len(files), suffix, dir)
    return files


def get_json_files(dir):
    return list_by_extension(dir, "json")


def get_properties_files(dir):
    return list_by_extension(dir, "properties")


def strip_extension(file_name):
    """Removes a trailing .json or .properties from the file name"""
    if not file_name:
        raise MissingArgument("No file name was specified.")

    for extension in (".json", ".properties"):
        if file_name.endswith(extension):
            return file_name[:-len(extension)]

    return file_name


def read_as_string(dir, file):
    full_path = os.path.join(dir, file)
    if not os.path.exists(full_path):
        _not_found(full_path, f"The file identified by the full path [ {full_path} ] is not found.")
        return None

    settings = get_settings()
    with open(full_path, "r", encoding=settings.encoding, errors=settings.encoding_errors) as f:
        return f.read()


def iter_lines(path, encoding=None, errors=None):
    """Yields the lines of a file, skipping blank lines and # or ! comments"""
    settings = get_settings()
    with open(path, "r", encoding=encoding or settings.encoding, errors=errors or settings.encoding_errors) as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line.strip() or line.startswith(COMMENT_MARKERS):
                continue
            yield line


async def _collect_lines(path, encoding, errors):
    lines = await asyncio.to_thread(lambda: list(iter_lines(path, encoding, errors)))
    logger.debug("Read %s lines from %s", len(lines), path)
    return lines


def read_as_lines(dir, file):
    """
    Reads a properties style file line by line.

    Returns an awaitable that resolves to the non-comment, non-blank lines once
    the end of the file is reached, or None straight away if the file is missing.
    """
    full_path = os.path.join(dir, file)
    if not os.path.exists(full_path):
        _not_found(full_path, f"The file identified by the full path [ {full_path} ] is not found.")
        return None

    settings = get_settings()
    return _collect_lines(full_path, settings.encoding, settings.encoding_errors)


def _output_path(dir, file, extension):
    if not os.path.exists(dir):
        _not_found(dir, f"The output directory [ {dir} ] is not a valid directory")
        return None

    return os.path.join(dir, f"{strip_extension(file)}{extension}")


def write_properties(dir, file, entries):
    """Writes each entry as its own record in <dir>/<file>.properties, separated by a blank line"""
    des = _output_path(dir, file, ".properties")
    if des is None:
        return None

    with open(des, "w", encoding=get_settings().encoding, newline="") as f:
        count = 0
        for entry in entries:
            f.write(entry.replace("\n", "\\n") + "\n\n")
            count += 1

    logger.debug("Wrote %s entries to %s", count, des)
    return des


def write_json(dir, file, json):
    """Writes the already serialized json string to <dir>/<file>.json"""
    des = _output_path(dir, file, ".json")
    if des is None:
        return None

    with open(des, "w", encoding=get_settings().encoding, newline="") as f:
        f.write(json)

    logger.debug("Wrote %s", des)
    return des
