"""Prescriptivism: rules core of a phoneme card game."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
