from .config import Settings, configure_logging, get_settings
from .errors import MissingArgument, PathNotFound
from .files import (
    get_json_files,
    get_properties_files,
    iter_lines,
    list_by_extension,
    read_as_lines,
    read_as_string,
    strip_extension,
    write_json,
    write_properties,
)
