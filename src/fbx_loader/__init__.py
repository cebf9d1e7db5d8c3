from .compression import zlib_decompress
from .document import HEAD_MAGIC, Document, load, parse, parse_bytes, read_document, read_version, verify_header
from .element import BLOCK_SENTINEL_LENGTH, MAX_SCOPE_DEPTH, Element, read_element
from .errors import DecompressionError, FbxError, FormatError, InvalidHeaderError, InvalidSentinelError, InvalidStringError, OffsetMismatchError, PropertyListLengthError, ScopeDepthError, UnexpectedEofError, UnknownPropertyTagError
from .export import document_to_json, document_to_xml, element_to_dict
from .properties import Property, read_array, read_property
from .reader import ByteReader
