import pytest

from ..errors import (
    DescriptionTooLong,
    EmptyId,
    EmptySlug,
    EmptyTitle,
    InvalidId,
    InvalidSlug,
    InvalidSlugCharacters,
    SlugHyphenBoundary,
    TitleTooLong,
    ValidationError,
)
from ..values import SLUG_RE, Description, Slug, Title


@pytest.mark.parametrize('value', ['a', '1-buy-milk', 'abc123', '42-x-y-z'])
def test_slug_accepts_valid(value):
    assert Slug(value).value == value
    assert str(Slug(value)) == value


@pytest.mark.parametrize('value,exc', [
    ('', EmptySlug),
    ('Upper-case', InvalidSlugCharacters),
    ('has space', InvalidSlugCharacters),
    ('under_score', InvalidSlugCharacters),
    ('-leading', SlugHyphenBoundary),
    ('trailing-', SlugHyphenBoundary),
    ('double--hyphen', InvalidSlugCharacters),
])
def test_slug_rejects_invalid(value, exc):
    with pytest.raises(exc):
        Slug(value)


def test_slug_errors_are_validation_errors():
    with pytest.raises(InvalidSlug):
        Slug('-x')
    with pytest.raises(ValidationError):
        Slug('')
    with pytest.raises(ValueError):
        Slug('A')


def test_slug_from_id_and_title():
    assert Slug.from_id_and_title('1', 'Buy milk').value == '1-buy-milk'
    assert Slug.from_id_and_title('2', 'Test: Task with Special & Chars!').value == \
        '2-test-task-with-special-chars'
    assert Slug.from_id_and_title('3', '  Test   Task  with   Spaces  ').value == \
        '3-test-task-with-spaces'
    assert Slug.from_id_and_title('4', 'a -- b').value == '4-a-b'
    assert Slug.from_id_and_title(5, 'Numbers 2 go').value == '5-numbers-2-go'


@pytest.mark.parametrize('title', [
    'Hello World', '¡Ünïcode títle!', '---dash---', 'tab\tand\nnewline', 'x' * 100,
])
def test_slug_from_id_and_title_always_valid(title):
    slug = Slug.from_id_and_title('7', title)
    assert SLUG_RE.match(slug.value)
    assert slug.id == '7'


def test_slug_from_id_and_title_errors():
    with pytest.raises(EmptyId):
        Slug.from_id_and_title('', 'Title')
    with pytest.raises(EmptyId):
        Slug.from_id_and_title(None, 'Title')
    with pytest.raises(InvalidId):
        Slug.from_id_and_title('1-2', 'Title')
    with pytest.raises(EmptyTitle):
        Slug.from_id_and_title('1', '')
    with pytest.raises(EmptyTitle):
        Slug.from_id_and_title('1', '!!! ???')


def test_slug_equality():
    assert Slug('1-a') == Slug('1-a')
    assert Slug('1-a') != Slug('1-b')
    assert Slug('1-a') != None  # noqa: E711
    assert Slug('1-a') != '1-a'
    assert len({Slug('1-a'), Slug('1-a')}) == 1


def test_slug_is_immutable():
    slug = Slug('1-a')
    with pytest.raises(AttributeError):
        slug._value = '2-b'


def test_title_trims_and_validates():
    assert Title('  Buy milk  ').value == 'Buy milk'
    assert Title('x' * 100).value == 'x' * 100
    with pytest.raises(EmptyTitle):
        Title('   ')
    with pytest.raises(TitleTooLong):
        Title('x' * 101)
    assert Title('a') == Title(' a ')
    assert Title('a') != Description('a')


def test_description():
    assert Description('').value == ''
    assert Description('   ').value == ''
    text = 'line one\n\n  indented   line\ttab'
    assert Description(f'\n {text} \n').value == text
    assert Description('x' * 1000).value == 'x' * 1000
    with pytest.raises(DescriptionTooLong):
        Description('x' * 1001)
    assert str(Description(' d ')) == 'd'
