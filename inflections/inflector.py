import logging
import re
import threading
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .exceptions import InvalidRule, InvalidTemplate
from .rules import Regular, Irregular, PLURALS, SINGULARS, IRREGULARS, UNCOUNTABLES

logger = logging.getLogger('Inflections')

# $$, ${name} and $name, with the same meaning they have in the rule templates
_TEMPLATE_REFERENCE = re.compile(r'\$(?:(\$)|\{(\w+)\}|(\w+))')


class Matcher(NamedTuple):
    pattern: re.Pattern
    replace: str


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _translate(template: str, pattern: re.Pattern) -> str:
    """
    Convert a rule template into a ``re.sub`` template.

    :param template: The template as written in the rule, e.g. ``'${1}ies'``.
    :param pattern: The compiled pattern the template is applied to.
    :return: The template with ``\\g<N>`` group references.
    :raises InvalidTemplate: If the template references a group the pattern does not define.
    """
    def reference(match):
        if match.group(1):
            return '$'
        name = match.group(2) or match.group(3)
        if name.isdigit():
            if int(name) > pattern.groups:
                raise InvalidTemplate(f'Template "{template}" references group {name}, but "{pattern.pattern}" has {pattern.groups} groups')
        elif name not in pattern.groupindex:
            raise InvalidTemplate(f'Template "{template}" references group "{name}", which is not defined in "{pattern.pattern}"')
        return f'\\g<{name}>'

    return _TEMPLATE_REFERENCE.sub(reference, template.replace('\\', '\\\\'))


def _matcher(find: str, replace: str, flags: int = 0) -> Matcher:
    try:
        pattern = re.compile(find, flags)
    except re.error as e:
        raise InvalidRule(f'Invalid pattern "{find}": {e}') from e
    return Matcher(pattern, _translate(replace, pattern))


def _compile_regular(rule: Regular) -> List[Matcher]:
    written = _matcher(rule.find, rule.replace)

    # ALL CAPS first, then the rule as written, then the case insensitive catch-all
    return [
        _matcher(rule.find.upper(), rule.replace.upper()),
        written,
        _matcher(rule.find, rule.replace, re.IGNORECASE),
    ]


def _compile_irregular(find: str, replace: str) -> List[Matcher]:
    # Anchored at the end only, so that "salesperson" becomes "salespeople"
    return [
        Matcher(re.compile(re.escape(variant(find)) + '$'), variant(replace).replace('\\', '\\\\'))
        for variant in (str.upper, _title, str.lower)
    ]


def _compile_uncountable(word: str) -> Matcher:
    return Matcher(re.compile('^(' + re.escape(word) + ')$', re.IGNORECASE), r'\g<1>')


def _apply(matchers: Sequence[Matcher], word: str) -> str:
    for matcher in matchers:
        if matcher.pattern.search(word):
            return matcher.pattern.sub(matcher.replace, word)
    return word


def _regulars(rules: Iterable[Sequence[str]]) -> List[Regular]:
    regulars = [Regular(*rule) for rule in rules]
    for rule in regulars:
        if not rule.find:
            logger.warning(f'The rule {tuple(rule)} has an empty pattern and matches every word')
        _compile_regular(rule)
    return regulars


class Inflector:
    """
    A set of rules to pluralize and singularize English nouns.

    The rules are kept in four tables: the plural rules, the singular rules, the
    irregular words and the uncountable words. Every change to a table compiles
    the tables again into two ordered lists of matchers, one for each direction.

    The first matcher that matches the word wins:

    1. uncountable words, matched as whole words ignoring case,
    2. irregular words, matched at the end of the word, in upper case, title case
       and lower case,
    3. regular rules, the last one added first, each one in upper case, as written
       and ignoring case.

    >>> inflector = Inflector()
    >>> inflector.pluralize('FancyPerson')
    'FancyPeople'
    >>> inflector.add_plural('(bu)s$', '${1}ses')
    >>> inflector.pluralize('BUS')
    'BUSES'
    """

    def __init__(self,
                 plurals: Optional[Iterable[Sequence[str]]] = None,
                 singulars: Optional[Iterable[Sequence[str]]] = None,
                 irregulars: Optional[Iterable[Sequence[str]]] = None,
                 uncountables: Optional[Iterable[str]] = None):
        self._lock = threading.RLock()
        self._batch_depth = 0
        self._plurals = _regulars(PLURALS if plurals is None else plurals)
        self._singulars = _regulars(SINGULARS if singulars is None else singulars)
        self._irregulars = [Irregular(*pair) for pair in (IRREGULARS if irregulars is None else irregulars)]
        self._uncountables = list(UNCOUNTABLES if uncountables is None else uncountables)
        self._plural_matchers: Tuple[Matcher, ...] = ()
        self._singular_matchers: Tuple[Matcher, ...] = ()
        self.rebuild()

    def pluralize(self, word: str) -> str:
        """
        Return the plural form of a word, or the word itself when no rule matches.

        The case of the word is preserved: ``'person'``, ``'Person'`` and ``'PERSON'``
        become ``'people'``, ``'People'`` and ``'PEOPLE'``.
        """
        return _apply(self._plural_matchers, word)

    def singularize(self, word: str) -> str:
        """
        Return the singular form of a word, or the word itself when no rule matches.
        """
        return _apply(self._singular_matchers, word)

    def rebuild(self):
        """
        Compile the four tables into the plural and singular matchers.

        The matchers are replaced only after both lists have been compiled.
        """
        with self._lock:
            plural_matchers = []
            singular_matchers = []

            for word in self._uncountables:
                matcher = _compile_uncountable(word)
                plural_matchers.append(matcher)
                singular_matchers.append(matcher)

            for irregular in self._irregulars:
                plural_matchers.extend(_compile_irregular(irregular.singular, irregular.plural))

            for irregular in self._irregulars:
                singular_matchers.extend(_compile_irregular(irregular.plural, irregular.singular))

            for rule in reversed(self._plurals):
                plural_matchers.extend(_compile_regular(rule))

            for rule in reversed(self._singulars):
                singular_matchers.extend(_compile_regular(rule))

            self._plural_matchers = tuple(plural_matchers)
            self._singular_matchers = tuple(singular_matchers)

        logger.debug(f'Compiled {len(plural_matchers)} plural matchers and {len(singular_matchers)} singular matchers')

    def batch(self, succeed_exceptions=None) -> 'Batch':
        return Batch(self, succeed_exceptions)

    def copy(self) -> 'Inflector':
        with self._lock:
            return Inflector(self._plurals, self._singulars, self._irregulars, self._uncountables)

    def add_plural(self, find: str, replace: str):
        """
        Add a pluralization rule. The new rule is tried before all the existing ones.

        :param find: A regular expression matching the end of the singular word.
        :param replace: The replacement, with group references written as ``${1}``.
        :raises InvalidRule: If ``find`` is not a valid regular expression or
            ``replace`` references a group that ``find`` does not define.
        """
        rules = _regulars([(find, replace)])
        with self._lock:
            self._plurals.extend(rules)
            self._changed()

    def add_singular(self, find: str, replace: str):
        """
        Add a singularization rule. The new rule is tried before all the existing ones.

        :raises InvalidRule: See :meth:`add_plural`.
        """
        rules = _regulars([(find, replace)])
        with self._lock:
            self._singulars.extend(rules)
            self._changed()

    def add_irregular(self, singular: str, plural: str):
        with self._lock:
            self._irregulars.append(Irregular(singular, plural))
            self._changed()

    def add_uncountable(self, word: str):
        with self._lock:
            self._uncountables.append(word)
            self._changed()

    def get_plural(self) -> List[Regular]:
        with self._lock:
            return list(self._plurals)

    def get_singular(self) -> List[Regular]:
        with self._lock:
            return list(self._singulars)

    def get_irregular(self) -> List[Irregular]:
        with self._lock:
            return list(self._irregulars)

    def get_uncountable(self) -> List[str]:
        with self._lock:
            return list(self._uncountables)

    def set_plural(self, rules: Iterable[Sequence[str]]):
        rules = _regulars(rules)
        with self._lock:
            self._plurals = rules
            self._changed()

    def set_singular(self, rules: Iterable[Sequence[str]]):
        rules = _regulars(rules)
        with self._lock:
            self._singulars = rules
            self._changed()

    def set_irregular(self, pairs: Iterable[Sequence[str]]):
        pairs = [Irregular(*pair) for pair in pairs]
        with self._lock:
            self._irregulars = pairs
            self._changed()

    def set_uncountable(self, words: Iterable[str]):
        words = list(words)
        with self._lock:
            self._uncountables = words
            self._changed()

    def _changed(self):
        if not self._batch_depth:
            self.rebuild()

    def _tables(self):
        return list(self._plurals), list(self._singulars), list(self._irregulars), list(self._uncountables)

    def _restore(self, tables):
        self._plurals, self._singulars, self._irregulars, self._uncountables = tables


class Batch:
    """
    Group several changes to an :class:`Inflector` and compile the rules only once.

    The rules are compiled when the outermost batch exits. If the block raises an
    exception (other than the ``succeed_exceptions``) or :meth:`abort` is called,
    the tables are restored to their content at the beginning of the batch.

    The inflector lock is held for the whole block, so other threads cannot change
    the rules in the meantime. Other threads keep using the previously compiled
    rules until the batch exits.
    """

    def __init__(self, inflector: Inflector, succeed_exceptions=None):
        self.inflector = inflector
        self._succeed_exceptions = tuple(succeed_exceptions or [])
        self._saved_tables = None
        self._abort = False

    def __enter__(self):
        self.inflector._lock.acquire()
        self._saved_tables = self.inflector._tables()
        self.inflector._batch_depth += 1
        return self

    def __exit__(self, exc_type, value, traceback):
        try:
            self.inflector._batch_depth -= 1
            aborting = self._abort or (exc_type is not None and not issubclass(exc_type, self._succeed_exceptions))
            if aborting:
                self.inflector._restore(self._saved_tables)
                logger.debug('Batch aborted, rules restored')
            if not self.inflector._batch_depth:
                self.inflector.rebuild()
        finally:
            self.inflector._lock.release()

    def abort(self):
        self._abort = True


default_inflector = Inflector()
