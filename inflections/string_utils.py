import re
from typing import Optional

from sqlglot import exp

from .inflector import Inflector, default_inflector

_WORD_BOUNDARY_1 = re.compile(r'(.)([A-Z][a-z]+)')
_WORD_BOUNDARY_2 = re.compile(r'([a-z0-9])([A-Z])')


def to_camel_case(input_string: str) -> str:
    """
    Convert a snake_case string to CamelCase.

    :param input_string: The snake_case string to convert.
    :return: The CamelCase string.
    """
    words = input_string.split('_')
    return ''.join(word.capitalize() for word in words)


def to_snake_case(input_string: str) -> str:
    """
    Convert a CamelCase string to snake_case.

    :param input_string: The CamelCase string to convert, e.g. ``'HTTPServer'``.
    :return: The snake_case string, e.g. ``'http_server'``.
    """
    words = _WORD_BOUNDARY_1.sub(r'\1_\2', input_string)
    return _WORD_BOUNDARY_2.sub(r'\1_\2', words).lower()


def table_name(class_name: str, inflector: Optional[Inflector] = None) -> str:
    """
    Derive the table name of a model class: ``'FancyPerson'`` -> ``'fancy_people'``.

    The class name is pluralized before it is split, so irregular words at the end
    of a compound name keep working.

    :param class_name: The CamelCase name of the model class.
    :param inflector: The rules to use, the default rules if omitted.
    """
    inflector = inflector or default_inflector
    return to_snake_case(inflector.pluralize(class_name))


def model_name(table_name: str, inflector: Optional[Inflector] = None) -> str:
    """
    Derive the model class name of a table: ``'fancy_people'`` -> ``'FancyPerson'``.
    """
    inflector = inflector or default_inflector
    return inflector.singularize(to_camel_case(table_name))


def quote_table_name(name: str, dialect: Optional[str] = None) -> str:
    """
    Quote a table name for the given SQL dialect.

    :param name: The unquoted table name.
    :param dialect: A sqlglot dialect name, e.g. ``'sqlite'``, ``'postgres'`` or ``'mysql'``.
    :return: The quoted identifier, backquoted for ``'mysql'`` and double quoted for ``'postgres'``.
    """
    return exp.to_identifier(name).sql(dialect=dialect, identify=True)
