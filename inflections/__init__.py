"""
Pluralize and singularize English nouns.

    >>> pluralize('person'), pluralize('Person'), pluralize('PERSON')
    ('people', 'People', 'PEOPLE')
    >>> singularize('FancyPeople')
    'FancyPerson'

The standard rules come from Rails's ActiveSupport inflections. More rules can be
registered at run time, and they take precedence over the existing ones:

    add_uncountable('fish')
    add_irregular('person', 'people')
    add_plural('(bu)s$', '${1}ses')      # bus -> buses, BUS -> BUSES, Bus -> Buses
    add_singular('(bus)(es)?$', '${1}')  # buses -> bus, BUSES -> BUS, Buses -> Bus

The functions of this module change and use the rules of ``default_inflector``.
Create an ``Inflector`` to use an independent set of rules.
"""
from typing import Iterable, List, Sequence

from .exceptions import InvalidRule, InvalidTemplate
from .inflector import Inflector, Batch, Matcher, default_inflector, logger
from .rules import Regular, Irregular, PLURALS, SINGULARS, IRREGULARS, UNCOUNTABLES
from .string_utils import to_camel_case, to_snake_case, table_name, model_name, quote_table_name


def pluralize(word: str) -> str:
    return default_inflector.pluralize(word)


def singularize(word: str) -> str:
    return default_inflector.singularize(word)


plural = pluralize
singular = singularize


def add_plural(find: str, replace: str):
    default_inflector.add_plural(find, replace)


def add_singular(find: str, replace: str):
    default_inflector.add_singular(find, replace)


def add_irregular(singular: str, plural: str):
    default_inflector.add_irregular(singular, plural)


def add_uncountable(word: str):
    default_inflector.add_uncountable(word)


def get_plural() -> List[Regular]:
    return default_inflector.get_plural()


def get_singular() -> List[Regular]:
    return default_inflector.get_singular()


def get_irregular() -> List[Irregular]:
    return default_inflector.get_irregular()


def get_uncountable() -> List[str]:
    return default_inflector.get_uncountable()


def set_plural(rules: Iterable[Sequence[str]]):
    default_inflector.set_plural(rules)


def set_singular(rules: Iterable[Sequence[str]]):
    default_inflector.set_singular(rules)


def set_irregular(pairs: Iterable[Sequence[str]]):
    default_inflector.set_irregular(pairs)


def set_uncountable(words: Iterable[str]):
    default_inflector.set_uncountable(words)


def batch(succeed_exceptions=None) -> Batch:
    return default_inflector.batch(succeed_exceptions)
