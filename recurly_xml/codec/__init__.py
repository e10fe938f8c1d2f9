from recurly_xml.codec.elements import (
    append_text,
    child_float,
    child_int,
    child_text,
    is_nil,
    local_name,
    parse_document,
    to_bytes,
)
from recurly_xml.codec.href import decode_href_int, decode_href_string, href_segment
from recurly_xml.codec.nullable import (
    append_null_bool,
    append_null_time,
    decode_null_bool,
    decode_null_time,
    format_time,
    parse_time,
)

__all__ = [
    "append_null_bool",
    "append_null_time",
    "append_text",
    "child_float",
    "child_int",
    "child_text",
    "decode_href_int",
    "decode_href_string",
    "decode_null_bool",
    "decode_null_time",
    "format_time",
    "href_segment",
    "is_nil",
    "local_name",
    "parse_document",
    "parse_time",
    "to_bytes",
]
