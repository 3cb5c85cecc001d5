globals = {}
filters = {}

__all__ = ['function', 'filter']


def _register_function(store, name, func):
    if func is not None:
        store[name] = func
        return func
    if callable(name):
        store[name.__name__] = name
        return name

    def decorator(func):
        store[name or func.__name__] = func
        return func

    return decorator


def filter(name=None, func=None):
    return _register_function(filters, name, func)


def function(name=None, func=None):
    return _register_function(globals, name, func)
