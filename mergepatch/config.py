import os

from traitlets import Unicode, Enum, Integer, Bool, HasTraits, List, TraitError, validate
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'mergepatch_config'


class MergePatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, in descending priority order."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.mergepatch')]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, MergePatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(MergePatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Show(MergePatchConfigurable):

    use_color = Bool(
        True,
        help="whether to use ANSI color code escapes for text output.",
    ).tag(config=True)


class Diff(Show):

    include = List(
        Unicode(),
        default_value=[],
        help="dot separated paths (e.g. 'id' or 'profile.bio') to always "
             "include in a diff, even when unchanged.",
    ).tag(config=True)

    sort_keys = Bool(
        True,
        help="whether to sort object keys when writing a patch as JSON.",
    ).tag(config=True)

    indent = Integer(
        None,
        allow_none=True,
        help="indentation used when writing a patch as JSON. "
             "Default is None (compact).",
    ).tag(config=True)

    @validate('include')
    def _valid_include(self, proposal):
        for path in proposal['value']:
            if not path or path.startswith('.') or path.endswith('.'):
                raise TraitError('include paths need to be dot separated keys, got %r' % path)
        return proposal['value']


class Patch(MergePatchConfigurable):

    indent = Integer(
        2,
        allow_none=True,
        help="indentation used when writing a patched document as JSON.",
    ).tag(config=True)


class MpDiff(Global, Diff):
    pass

class MpApply(Global, Patch):
    pass

class MpShow(Global, Show):
    pass


entrypoint_configurables = {
    'mergepatch-diff': MpDiff,
    'mergepatch-apply': MpApply,
    'mergepatch-show': MpShow,
}
