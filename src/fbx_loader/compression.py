import zlib
from .errors import DecompressionError



def zlib_decompress(dt):
	try:
		return zlib.decompress(dt)
	except zlib.error as e:
		raise DecompressionError(f"Corrupt zlib array payload: {e}") from e
