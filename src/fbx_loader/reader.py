import struct
from .errors import InvalidStringError, UnexpectedEofError



READ_CHUNK_SIZE=65536



class ByteReader(object):
	"""Wraps a binary stream and counts consumed bytes itself, so ``tell()`` is never needed."""

	def __init__(self,stream,offset=0):
		self.stream=stream
		self.pos=offset

	def read(self,n):
		if (n==0):
			return b""
		if (n<=READ_CHUNK_SIZE):
			o=self.stream.read(n)
		else:
			# n comes from the file, bound each stream read
			l=[]
			k=0
			while (k<n):
				dt=self.stream.read(min(n-k,READ_CHUNK_SIZE))
				if (not dt):
					break
				l.append(dt)
				k+=len(dt)
			o=b"".join(l)
		if (len(o)!=n):
			raise UnexpectedEofError(self.pos,n,len(o))
		self.pos+=n
		return o



def _unpack(r,f,n):
	return struct.unpack(f,r.read(n))[0]



def read_u8(r):
	return _unpack(r,"B",1)



def read_bool(r):
	return (read_u8(r)!=0)



def read_i16(r):
	return _unpack(r,"<h",2)



def read_u32(r):
	return _unpack(r,"<I",4)



def read_i32(r):
	return _unpack(r,"<i",4)



def read_i64(r):
	return _unpack(r,"<q",8)



def read_f32(r):
	return _unpack(r,"<f",4)



def read_f64(r):
	return _unpack(r,"<d",8)



def read_ubyte_bytes(r):
	return r.read(read_u8(r))



def read_uint_bytes(r):
	return r.read(read_u32(r))



def _decode(r,dt):
	try:
		return str(dt,"utf-8")
	except UnicodeDecodeError as e:
		raise InvalidStringError(f"Invalid UTF-8 string: {e.reason}",r.pos-len(dt)+e.start) from e



def read_ubyte_string(r):
	return _decode(r,read_ubyte_bytes(r))



def read_uint_string(r):
	return _decode(r,read_uint_bytes(r))
