import io
import logging
from dataclasses import dataclass
from .compression import zlib_decompress
from .element import Element, read_element
from .errors import InvalidHeaderError
from .reader import ByteReader, read_u32



logger=logging.getLogger(__name__)
HEAD_MAGIC=b"Kaydara FBX Binary\x20\x20\x00\x1a\x00"



@dataclass(frozen=True)
class Document(object):
	version: int
	root: Element



def verify_header(r):
	i=r.pos
	dt=r.read(len(HEAD_MAGIC))
	if (dt!=HEAD_MAGIC):
		raise InvalidHeaderError("Invalid FBX header",i)



def read_version(r):
	return read_u32(r)



def read_document(f,decompress=zlib_decompress,strict=False):
	"""
	Decodes a whole binary FBX stream.

	``f`` is any object with a ``read(n)`` method, positioned at the first byte of the header.
	``decompress`` inflates compressed array payloads and ``strict`` cross-checks every property list length.
	"""
	r=(f if isinstance(f,ByteReader) else ByteReader(f))
	verify_header(r)
	v=read_version(r)
	logger.info("FBX binary version %d",v)
	l=[]
	while (True):
		e=read_element(r,decompress,strict)
		if (e is None):
			break
		l.append(e)
	logger.info("Decoded %d top-level element%s (%d bytes)",len(l),("" if len(l)==1 else "s"),r.pos)
	return Document(v,Element("",(),tuple(l)))



def parse(f,decompress=zlib_decompress,strict=False):
	return read_document(f,decompress,strict).root



def parse_bytes(dt,decompress=zlib_decompress,strict=False):
	return read_document(io.BytesIO(dt),decompress,strict)



def load(fp,decompress=zlib_decompress,strict=False):
	with open(fp,"rb") as f:
		return read_document(f,decompress,strict)
