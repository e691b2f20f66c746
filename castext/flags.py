import re

TEXT_FLAGS = re.I | re.U
MULTI_TEXT_FLAGS = re.I | re.U | re.M
