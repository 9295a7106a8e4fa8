# -*- coding: utf-8 -*-
from functools import wraps


def class_cache(class_):
    """
    Decorator that caches class instances per constructor arguments.

    :param class_: The class to be cached
    :return: Wrapper function that returns cached instances
    """
    __instances = {}

    @wraps(class_)
    def wrapper(*args, **kwargs):
        key = (class_, args, frozenset(kwargs.items()))
        if key not in __instances:
            __instances[key] = class_(*args, **kwargs)
        return __instances[key]

    return wrapper
