import logging
import os
from fbx_loader import FbxError, document_to_json, load



logger=logging.getLogger("fbx2json")



def main():
	logging.basicConfig(level=logging.INFO,format="%(levelname)s %(name)s: %(message)s")
	for k in os.listdir("."):
		if (k[-4:].lower()==".fbx"):
			try:
				d=load(k)
			except FbxError as e:
				logger.warning("Skipping '%s': %s",k,e)
				continue
			with open(f"{k[:-4]}.json","w") as f:
				f.write(document_to_json(d))
			logger.info("Converted '%s' -> '%s.json'",k,k[:-4])



if (__name__=="__main__"):
	main()
