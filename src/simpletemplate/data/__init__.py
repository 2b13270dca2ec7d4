from simpletemplate.data.loader import (
    DEMO_DATA,
    DataLoadError,
    load_data,
    merge_data,
    parse_assignment,
    parse_data_string,
)

__all__ = [
    "DEMO_DATA", "DataLoadError", "load_data", "merge_data",
    "parse_assignment", "parse_data_string",
]
