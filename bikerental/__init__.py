"""
The main package for the bike rental service.
"""

import logging

from bikerental.config import rental_mode

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s %(name)-12s %(levelname)-8s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.DEBUG if rental_mode == "development" else logging.INFO)
