"""Shared constants describing the outfit image bucket."""

from .constant import *
