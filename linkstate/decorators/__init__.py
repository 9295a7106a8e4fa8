# -*- coding: utf-8 -*-
from .decorators import class_cache

__all__ = ['class_cache']
