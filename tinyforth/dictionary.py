"""
TinyForth Dictionary - Named entries and their executable bodies

A body is one of three tagged forms:
- Primitive: a built-in word implemented by a Python callable
- Literal: pushes a fixed integer
- Compiled: runs a sequence of entries captured at definition time
"""

import logging
from collections import namedtuple

from .errors import UnknownWordError

logger = logging.getLogger(__name__)


Primitive = namedtuple('Primitive', 'func')
Literal = namedtuple('Literal', 'value')
Compiled = namedtuple('Compiled', 'entries')


class Entry(namedtuple('Entry', 'name immediate body')):
    """A dictionary entry; literal entries have no name"""

    __slots__ = ()

    def describe(self):
        """Render the entry the way .D shows it"""
        if isinstance(self.body, Compiled):
            parts = [':', self.name]
            parts.extend(_source_word(entry) for entry in self.body.entries)
            parts.append(';')
            text = ' '.join(parts)
        elif isinstance(self.body, Literal):
            text = str(self.body.value)
        else:
            text = f"{self.name} <primitive>"
        if self.immediate:
            text += ' immediate'
        return text


def _source_word(entry):
    if isinstance(entry.body, Literal):
        return str(entry.body.value)
    return entry.name


class Dictionary:
    """Mapping from word name to Entry. Entries are replaced, never removed."""

    def __init__(self):
        self.entries = {}

    def define(self, name, body, immediate=False):
        self.entries[name] = Entry(name, immediate, body)
        return self.entries[name]

    def alias(self, new_name, old_name):
        """Register new_name with the flag and body of old_name"""
        old = self.entries.get(old_name)
        if old is None:
            raise UnknownWordError(old_name)
        self.entries[new_name] = Entry(new_name, old.immediate, old.body)
        logger.debug("alias %s -> %s", new_name, old_name)
        return self.entries[new_name]

    def lookup(self, name):
        return self.entries.get(name)

    def __contains__(self, name):
        return name in self.entries

    def __len__(self):
        return len(self.entries)

    def dump(self):
        """One line per entry, sorted by name"""
        return [self.entries[name].describe() for name in sorted(self.entries)]
