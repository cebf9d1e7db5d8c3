import json
import re
from xml.sax.saxutils import escape



XML_ATTRIBUTE_ENTITIES={"\"":"&quot;","\n":"&#10;","\t":"&#9;"}
XML_NAME_INVALID=re.compile(r"[^A-Za-z0-9_.\-]")



def property_to_json(p):
	if (p.tag=="R"):
		return "".join([f"\\x{e:02x}" for e in p.value])
	if (p.tag=="S"):
		return p.value.replace("\x00\x01","::")
	if (p.tag=="c"):
		return list(p.value)
	return p.value



def element_to_dict(e):
	o={"name":e.name}
	if (len(e.properties)>0):
		o["data"]=[property_to_json(k) for k in e.properties]
	if (len(e.children)>0):
		o["children"]=[element_to_dict(k) for k in e.children]
	return o



def document_to_json(d):
	return json.dumps([element_to_dict(e) for e in d.root.children],indent="\t",sort_keys=False)



def _xml_value(p):
	v=property_to_json(p)
	if (p.is_array):
		v=",".join([str(e) for e in v])
	return escape(str(v),XML_ATTRIBUTE_ENTITIES)



def _xml_name(nm):
	nm=XML_NAME_INVALID.sub("_",nm)
	if (not nm or not (nm[0].isalpha() or nm[0]=="_")):
		nm="_"+nm
	return nm



def _write_xml(e,o,il):
	t=_xml_name(e.name)
	o.append("\t"*il+f"<{t}")
	pc=len(e.properties)
	if (pc>0):
		o.append(f" type{('' if pc==1 else 's')}=\"{''.join([k.tag for k in e.properties])}\"")
		if (pc==1):
			o.append(f" value=\"{_xml_value(e.properties[0])}\"")
		else:
			for j,k in enumerate(e.properties):
				o.append(f" v{j}=\"{_xml_value(k)}\"")
	if (len(e.children)>0):
		o.append(">\n")
		for k in e.children:
			_write_xml(k,o,il+1)
		o.append("\t"*il+f"</{t}>\n")
	else:
		o.append("/>\n")



def document_to_xml(d):
	o=[f"<?xml version=\"1.0\" encoding=\"UTF-8\" standalone=\"no\"?>\n<fbx version=\"{d.version}\">\n"]
	for e in d.root.children:
		_write_xml(e,o,1)
	o.append("</fbx>\n")
	return "".join(o)
