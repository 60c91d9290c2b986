import logging

logger = logging.getLogger("imagefetch")
