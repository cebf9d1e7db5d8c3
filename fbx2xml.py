import logging
import os
from fbx_loader import FbxError, document_to_xml, load



logger=logging.getLogger("fbx2xml")



def main():
	logging.basicConfig(level=logging.INFO,format="%(levelname)s %(name)s: %(message)s")
	for k in os.listdir("."):
		if (k[-4:].lower()==".fbx"):
			try:
				d=load(k)
			except FbxError as e:
				logger.warning("Skipping '%s': %s",k,e)
				continue
			with open(f"{k[:-4]}.xml","w") as f:
				f.write(document_to_xml(d))
			logger.info("Converted '%s' -> '%s.xml'",k,k[:-4])



if (__name__=="__main__"):
	main()
