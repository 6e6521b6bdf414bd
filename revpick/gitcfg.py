"""Reads git-config values for revpick"""
def create(context):
    """Create GitConfig instances"""
    return GitConfig(context)


def _config_to_python(value):
    """Convert a Git config string into a Python value"""
    if value in ('true', 'yes', 'on'):
        value = True
    elif value in ('false', 'no', 'off'):
        value = False
    else:
        try:
            value = int(value)
        except ValueError:
            pass
    return value


def _read_config_from_null_list(config_output):
    """Parse the "git config --list -z" records"""
    for record in config_output.rstrip('\0').split('\0'):
        if not record:
            continue
        try:
            name, value = record.split('\n', 1)
        except ValueError:
            # the user has an empty entry in their git config,
            # which Git interprets as meaning "true"
            name = record
            value = 'true'
        yield (name, _config_to_python(value))


class GitConfig:
    """Encapsulate access to git-config values."""

    def __init__(self, context):
        self.context = context
        self.git = context.git
        self._all = {}
        self._renamed_keys = {}
        self._loaded = False

    def reset(self):
        """Forget cached values so that the next lookup re-reads git config"""
        self._all.clear()
        self._renamed_keys.clear()
        self._loaded = False

    def update(self):
        """Read all git config values, last one wins"""
        self._all.clear()
        self._renamed_keys.clear()
        status, config_output, _ = self.git.config(z=True, list=True)
        if status == 0:
            for key, value in _read_config_from_null_list(config_output):
                self._renamed_keys[key.lower()] = key
                self._all[key] = value
        self._loaded = True

    def _get_value(self, key):
        """Return a value from the map"""
        src = self._all
        try:
            return src[key]
        except KeyError:
            pass
        # Section and variable names are case-insensitive.
        key = self._renamed_keys.get(key.lower(), key)
        return src[key]

    def get(self, key, default=None, cached=True):
        """Return the value for a config key."""
        if not cached or not self._loaded:
            self.update()
        try:
            value = self._get_value(key)
        except KeyError:
            value = default
        return value
