import logging
from dataclasses import dataclass
from .compression import zlib_decompress
from .errors import InvalidSentinelError, OffsetMismatchError, PropertyListLengthError, ScopeDepthError
from .properties import read_property
from .reader import read_u32, read_ubyte_string



logger=logging.getLogger(__name__)
# every nested scope closes with a zeroed record, which tells `Name: {}` apart from `Name;`
BLOCK_SENTINEL_LENGTH=13
BLOCK_SENTINEL_DATA=b"\x00"*BLOCK_SENTINEL_LENGTH
MAX_SCOPE_DEPTH=256



@dataclass(frozen=True)
class Element(object):
	name: str
	properties: tuple=()
	children: tuple=()

	def __iter__(self):
		return iter(self.children)

	@property
	def values(self):
		return [e.value for e in self.properties]

	def find(self,nm):
		for e in self.children:
			if (e.name==nm):
				return e
		return None

	def find_all(self,nm):
		return [e for e in self.children if e.name==nm]



def read_element(r,decompress=zlib_decompress,strict=False,depth=0):
	"""
	Reads one scope starting at the reader's position.

	Returns ``None`` when the scope header holds a zero end offset (end of the sibling list).
	The reader is left exactly at the declared end offset, otherwise :class:`OffsetMismatchError` is raised.
	Scopes nested deeper than ``MAX_SCOPE_DEPTH`` raise :class:`ScopeDepthError`.
	"""
	e=read_u32(r)
	if (e==0):
		return None
	pc=read_u32(r)
	pl=read_u32(r)
	nm=read_ubyte_string(r)
	i=r.pos
	p=[]
	for _ in range(0,pc):
		p.append(read_property(r,decompress))
	if (strict and r.pos-i!=pl):
		raise PropertyListLengthError(f"Property list of '{nm}' spans {r.pos-i} bytes, header declares {pl}",i)
	ch=[]
	if (r.pos<e):
		if (depth>=MAX_SCOPE_DEPTH):
			raise ScopeDepthError(f"Scope '{nm}' is nested deeper than {MAX_SCOPE_DEPTH} levels",r.pos)
		while (r.pos<e-BLOCK_SENTINEL_LENGTH):
			el=read_element(r,decompress,strict,depth+1)
			if (el is not None):
				ch.append(el)
		i=r.pos
		if (r.read(BLOCK_SENTINEL_LENGTH)!=BLOCK_SENTINEL_DATA):
			raise InvalidSentinelError(f"Scope '{nm}' is not closed by a zeroed {BLOCK_SENTINEL_LENGTH}-byte record",i)
	if (r.pos!=e):
		raise OffsetMismatchError(e,r.pos)
	logger.debug("Element '%s': %d propert%s, %d child%s, ends at %d",nm,len(p),("y" if len(p)==1 else "ies"),len(ch),("" if len(ch)==1 else "ren"),e)
	return Element(nm,tuple(p),tuple(ch))
