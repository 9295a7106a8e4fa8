# -*- coding: utf-8 -*-
from .report import Report

__all__ = ["Report"]
