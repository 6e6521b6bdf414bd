"""Translation markers for user-visible strings

Labels are wrapped in N_() so that they can be extracted for translation.
No message catalogs are installed, so strings come back unchanged.
"""
import gettext

_translation = gettext.NullTranslations()


def N_(value):
    """Mark a string for translation and return its translation"""
    return _translation.gettext(value)
