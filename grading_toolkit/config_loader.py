# AGPL-3.0 License

"""
Settings loading for the grading toolkit.
"""

from os.path import abspath, dirname, join

from dynaconf import Dynaconf

current_dir = dirname(abspath(__file__))

global_settings = Dynaconf(
    envvar_prefix="GRADING_TOOLKIT",
    merge_enabled=True,
    settings_files=[join(current_dir, f) for f in [
        "settings/configuration.toml",
    ]],
)


def get_settings():
    """
    Return the active settings object.

    Values are read with ``get_settings().get(section, {}).get(key, default)``
    so every caller keeps its own default.
    """
    return global_settings
