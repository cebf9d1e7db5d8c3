class FbxError(Exception):
	def __init__(self,msg,offset=None):
		self.offset=offset
		if (offset is not None):
			msg=f"{msg} (at offset {offset})"
		super().__init__(msg)



class UnexpectedEofError(FbxError,EOFError):
	def __init__(self,offset,need,got):
		self.need=need
		self.got=got
		super().__init__(f"Unexpected end of stream: needed {need} byte{('' if need==1 else 's')}, got {got}",offset)



class FormatError(FbxError,ValueError):
	pass



class InvalidHeaderError(FormatError):
	pass



class UnknownPropertyTagError(FormatError):
	def __init__(self,tag,offset=None):
		self.tag=tag
		super().__init__(f"Unknown property type 0x{tag:02x}",offset)



class InvalidSentinelError(FormatError):
	pass



class OffsetMismatchError(FormatError):
	def __init__(self,expected,actual):
		self.expected=expected
		self.actual=actual
		super().__init__(f"Scope not reached: expected end offset {expected}, stream is at {actual}",actual)



class InvalidStringError(FormatError):
	pass



class PropertyListLengthError(FormatError):
	pass



class DecompressionError(FormatError):
	pass



class ScopeDepthError(FormatError):
	pass
