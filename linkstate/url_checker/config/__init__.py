# -*- coding: utf-8 -*-
from .config import CheckerConfig

__all__ = ["CheckerConfig"]
