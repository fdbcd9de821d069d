from ..patch_format import subpath


class DiffConfig:
    """Set of forced paths/other configs to pass around"""

    def __init__(self, *, include=None):
        if include is None:
            include = ()
        if isinstance(include, str):
            include = (include,)
        self._include = frozenset(include)

    def is_forced(self, path):
        "Return True if the value at path must appear in the diff even if unchanged."
        return path in self._include

    def subpath(self, path, key):
        return subpath(path, key)
