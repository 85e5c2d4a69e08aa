import logging
import threading

import pytest

from inflections import Inflector, InvalidRule, InvalidTemplate, Regular, Irregular, PLURALS, IRREGULARS
from inflections.rules import SINGULARS, UNCOUNTABLES


@pytest.fixture
def inflector():
    return Inflector()


def test_seed_tables(inflector):
    assert inflector.get_plural() == PLURALS
    assert inflector.get_singular() == SINGULARS
    assert inflector.get_irregular() == IRREGULARS
    assert inflector.get_uncountable() == UNCOUNTABLES
    assert Irregular('mombie', 'mombies') in inflector.get_irregular()
    assert inflector.pluralize('mombie') == 'mombies'


def test_added_plural_rule_is_tried_first(inflector):
    inflector.add_plural('(bu)s$', '${1}ses')
    assert inflector.get_plural()[-1] == Regular('(bu)s$', '${1}ses')
    assert inflector.pluralize('bus') == 'buses'
    assert inflector.pluralize('Bus') == 'Buses'
    assert inflector.pluralize('BUS') == 'BUSES'

    # "^(ox)$" is a built-in rule, the new one overrides it
    inflector.add_plural('(ox)$', '${1}es')
    assert inflector.pluralize('ox') == 'oxes'
    assert inflector.pluralize('OX') == 'OXES'


def test_added_singular_rule_is_tried_first(inflector):
    assert inflector.singularize('octopi') == 'octopus'
    inflector.add_singular('(octop)i$', '${1}od')
    assert inflector.singularize('octopi') == 'octopod'
    assert inflector.singularize('Octopi') == 'Octopod'


def test_irregulars_win_over_regular_rules(inflector):
    inflector.add_plural('(person)$', '${1}s')
    assert inflector.pluralize('person') == 'people'
    inflector.add_irregular('foot', 'feet')
    assert inflector.pluralize('Foot') == 'Feet'
    assert inflector.pluralize('bigfoot') == 'bigfeet'
    assert inflector.singularize('FEET') == 'FOOT'


def test_uncountables_win_over_irregulars(inflector):
    inflector.add_uncountable('people')
    assert inflector.singularize('people') == 'people'
    assert inflector.singularize('PEOPLE') == 'PEOPLE'
    assert inflector.pluralize('person') == 'people'


def test_uncountables_match_whole_words_only(inflector):
    assert inflector.pluralize('goldfish') == 'goldfishes'
    assert inflector.pluralize('fish') == 'fish'


def test_set_uncountable(inflector):
    inflector.set_uncountable([])
    assert inflector.get_uncountable() == []
    assert inflector.pluralize('fish') == 'fishes'
    assert inflector.pluralize('sheep') == 'sheeps'


def test_set_tables(inflector):
    inflector.set_plural([Regular('', ''), Regular('', '')])
    assert len(inflector.get_plural()) == 2
    inflector.set_singular([('', ''), ('', '')])
    assert len(inflector.get_singular()) == 2
    inflector.set_irregular([('goose', 'geese'), ('tooth', 'teeth')])
    assert inflector.get_irregular() == [Irregular('goose', 'geese'), Irregular('tooth', 'teeth')]
    inflector.set_uncountable(['', ''])
    assert len(inflector.get_uncountable()) == 2

    assert inflector.pluralize('goose') == 'geese'
    assert inflector.singularize('teeth') == 'tooth'
    assert inflector.pluralize('person') == 'person'


def test_empty_pattern_is_logged(inflector, caplog):
    with caplog.at_level(logging.WARNING, logger='Inflections'):
        inflector.set_plural([('', '')])
    assert 'empty pattern' in caplog.text
    assert inflector.pluralize('cat') == 'cat'


def test_rebuild_is_logged(inflector, caplog):
    with caplog.at_level(logging.DEBUG, logger='Inflections'):
        inflector.rebuild()
    assert 'Compiled 91 plural matchers and 112 singular matchers' in caplog.text


def test_snapshots_are_isolated(inflector):
    rules = inflector.get_plural()
    rules.append(Regular('(x)$', '${1}en'))
    irregulars = inflector.get_irregular()
    irregulars.clear()
    assert inflector.pluralize('box') == 'boxes'
    assert inflector.pluralize('person') == 'people'


def test_invalid_pattern_is_rejected(inflector):
    with pytest.raises(InvalidRule) as excinfo:
        inflector.add_plural('(bu', '${1}ses')
    assert '(bu' in str(excinfo.value)
    assert inflector.get_plural() == PLURALS

    with pytest.raises(InvalidRule):
        inflector.set_singular([('s$', ''), ('[a-', '')])
    assert inflector.get_singular() == SINGULARS
    assert inflector.singularize('cats') == 'cat'

    with pytest.raises(InvalidRule):
        Inflector(plurals=[('*', '')])


def test_invalid_template_is_rejected(inflector):
    with pytest.raises(InvalidTemplate) as excinfo:
        inflector.add_plural('(bu)s$', '${2}ses')
    assert 'group 2' in str(excinfo.value)

    with pytest.raises(InvalidRule):
        inflector.add_singular('(?P<stem>bu)ses$', '${root}')
    assert inflector.get_plural() == PLURALS
    assert inflector.get_singular() == SINGULARS


def test_templates(inflector):
    inflector.add_plural('^(cash)$', '${1}$$')
    assert inflector.pluralize('cash') == 'cash$'
    inflector.add_plural('^(?P<stem>cact)us$', '${stem}i')
    assert inflector.pluralize('cactus') == 'cacti'
    assert inflector.pluralize('CACTUS') == 'CACTI'
    inflector.add_plural('^z(ed)$', 'b$1')
    assert inflector.pluralize('zed') == 'bed'
    # $1ds refers to a group named "1ds"
    with pytest.raises(InvalidTemplate):
        inflector.add_plural('^(ze)d$', '$1ds')
    inflector.add_plural('^(back)slash$', '${1}\\')
    assert inflector.pluralize('backslash') == 'back\\'


def test_irregular_words_are_literal(inflector):
    inflector.add_irregular('c++', 'c++es')
    assert inflector.pluralize('c++') == 'c++es'
    assert inflector.pluralize('c') == 'cs'
    inflector.add_uncountable('a.b')
    assert inflector.pluralize('a.b') == 'a.b'
    assert inflector.pluralize('axb') == 'axbs'


def test_constructor_tables():
    inflector = Inflector(plurals=[('(x)$', '${1}en')], singulars=[], irregulars=[], uncountables=['fish'])
    assert inflector.pluralize('box') == 'boxen'
    assert inflector.pluralize('cat') == 'cat'
    assert inflector.pluralize('FISH') == 'FISH'
    assert inflector.singularize('boxen') == 'boxen'
    assert inflector.get_plural() == [Regular('(x)$', '${1}en')]


def test_copy_is_independent(inflector):
    other = inflector.copy()
    other.add_uncountable('deer')
    inflector.add_irregular('foot', 'feet')
    assert other.pluralize('deer') == 'deer'
    assert inflector.pluralize('deer') == 'deers'
    assert other.pluralize('foot') == 'foots'
    assert inflector.pluralize('foot') == 'feet'


def test_batch_compiles_once_on_exit(inflector):
    with inflector.batch():
        inflector.add_irregular('foot', 'feet')
        inflector.add_uncountable('deer')
        assert inflector.pluralize('foot') == 'foots'
        assert inflector.pluralize('deer') == 'deers'
    assert inflector.pluralize('foot') == 'feet'
    assert inflector.pluralize('deer') == 'deer'


def test_nested_batches(inflector):
    with inflector.batch():
        with inflector.batch():
            inflector.add_irregular('foot', 'feet')
        assert inflector.pluralize('foot') == 'foots'
        inflector.add_irregular('tooth', 'teeth')
    assert inflector.pluralize('foot') == 'feet'
    assert inflector.pluralize('tooth') == 'teeth'


def test_batch_rolls_back_on_exception(inflector):
    with pytest.raises(ValueError):
        with inflector.batch():
            inflector.add_irregular('foot', 'feet')
            raise ValueError
    assert inflector.get_irregular() == IRREGULARS
    assert inflector.pluralize('foot') == 'foots'

    with pytest.raises(InvalidRule):
        with inflector.batch():
            inflector.set_uncountable([])
            inflector.add_plural('(', '')
    assert inflector.get_uncountable() == UNCOUNTABLES
    assert inflector.pluralize('fish') == 'fish'


def test_batch_abort(inflector):
    with inflector.batch() as batch:
        inflector.set_plural([])
        batch.abort()
    assert inflector.get_plural() == PLURALS
    assert inflector.pluralize('cat') == 'cats'


def test_batch_succeed_exceptions(inflector):
    with pytest.raises(KeyError):
        with inflector.batch(succeed_exceptions=[KeyError]):
            inflector.add_irregular('foot', 'feet')
            raise KeyError('foot')
    assert inflector.pluralize('foot') == 'feet'


def test_concurrent_reads_during_changes(inflector):
    errors = []

    def read():
        for _ in range(200):
            if inflector.pluralize('person') != 'people':
                errors.append('person')

    threads = [threading.Thread(target=read) for _ in range(4)]
    for thread in threads:
        thread.start()
    for i in range(20):
        inflector.add_uncountable(f'word{i}')
    for thread in threads:
        thread.join()

    assert errors == []
    assert inflector.pluralize('word19') == 'word19'
