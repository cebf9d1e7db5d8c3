import logging
import struct
from dataclasses import dataclass
from .compression import zlib_decompress
from .errors import DecompressionError, FbxError, UnknownPropertyTagError
from .reader import read_bool, read_f32, read_f64, read_i16, read_i32, read_i64, read_u8, read_u32, read_uint_bytes, read_uint_string



logger=logging.getLogger(__name__)
SCALAR_READERS={
	"Y":read_i16,
	"C":read_bool,
	"I":read_i32,
	"F":read_f32,
	"D":read_f64,
	"L":read_i64,
	"R":read_uint_bytes,
	"S":read_uint_string
}
ARRAY_FORMATS={
	"f":"f",
	"i":"i",
	"d":"d",
	"l":"q",
	"b":"B",
	"c":"B"
}



@dataclass(frozen=True)
class Property(object):
	tag: str
	value: object

	@property
	def is_array(self):
		return (self.tag in ARRAY_FORMATS)

	def __repr__(self):
		return f"Property({self.tag!r}, {self.value!r})"



def read_array(r,f,decompress=zlib_decompress):
	"""Reads the (count, encoding, compressed_length) header and the payload, returning ``count`` unpacked values."""
	ln,e,l=read_u32(r),read_u32(r),read_u32(r)
	sz=struct.calcsize("<"+f)*ln
	if (e==0):
		dt=r.read(sz)
	else:
		i=r.pos
		dt=r.read(l)
		try:
			dt=decompress(dt)
		except FbxError:
			raise
		except Exception as ex:
			raise DecompressionError(f"Array decompression failed: {ex}",i) from ex
		logger.debug("Inflated array of %d element(s): %d -> %d bytes",ln,l,len(dt))
		if (len(dt)!=sz):
			raise DecompressionError(f"Decompressed array holds {len(dt)} bytes, expected {sz}",i)
	return list(struct.unpack(f"<{ln}{f}",dt))



def read_property(r,decompress=zlib_decompress):
	i=r.pos
	t=read_u8(r)
	k=chr(t)
	if (k in SCALAR_READERS):
		return Property(k,SCALAR_READERS[k](r))
	if (k in ARRAY_FORMATS):
		o=read_array(r,ARRAY_FORMATS[k],decompress)
		if (k=="b"):
			o=[(e!=0) for e in o]
		elif (k=="c"):
			o=bytes(o)
		return Property(k,o)
	raise UnknownPropertyTagError(t,i)
