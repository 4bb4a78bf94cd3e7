from .position import code_point_index, position_within_range, utf16_column
from .uri import parse_uri, path_to_uri, uri_to_path
