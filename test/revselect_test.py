"""Test the revpick.models.revselect module"""
# pylint: disable=redefined-outer-name
import pytest

from revpick.errors import RevisionNotFound
from revpick.models import revselect
from revpick.models.revselect import RefEntry
from revpick.models.revselect import Source

from .helper import Mock


TAGS = [RefEntry('v1.0', 'sha1'), RefEntry('v2.0', 'sha2')]
BRANCHES = [RefEntry('main', 'sha-main'), RefEntry('origin/main', 'sha-origin')]


@pytest.fixture
def resolved():
    """Map of expressions known to the fake resolver"""
    return {
        'abc123': 'abc1234567890abc1234567890abc1234567890a',
        'sha2': 'sha2-full',
        'HEAD~2': 'head-minus-two',
    }


@pytest.fixture
def selector(resolved):
    """A RevisionSelector with a dictionary-backed resolver"""
    return revselect.create(resolved.get)


def test_initial_state(selector):
    assert selector.source == Source.EXPRESSION
    assert selector.candidate == ''
    assert selector.selected_tag is None
    assert selector.selected_branch is None


def test_typed_expression_is_candidate(selector):
    selector.set_focus(Source.EXPRESSION)
    selector.set_expression('abc123')
    assert selector.candidate == 'abc123'


def test_expression_is_trimmed(selector):
    selector.set_expression('  HEAD~2 \t')
    assert selector.candidate == 'HEAD~2'


def test_expression_ignored_while_tag_focused(selector):
    selector.set_tags(TAGS)
    selector.set_focus(Source.TAG)
    selector.set_expression('abc123')
    assert selector.candidate == ''

    # Returning to the expression field picks up the text typed meanwhile.
    selector.set_focus(Source.EXPRESSION)
    assert selector.candidate == 'abc123'


def test_tag_matched_by_name(selector):
    selector.set_tags(TAGS)
    selector.set_focus(Source.TAG)
    selector.set_tag_text('v2.0')
    assert selector.selected_tag == RefEntry('v2.0', 'sha2')
    assert selector.candidate == 'sha2'


def test_tag_without_exact_match_is_none(selector):
    selector.set_tags(TAGS)
    selector.set_focus(Source.TAG)
    selector.set_tag_text('v2.0')
    selector.set_tag_text('v2')
    assert selector.selected_tag is None
    assert selector.candidate == ''

    selector.set_tag_text('V2.0')
    assert selector.selected_tag is None


def test_tag_text_before_load_is_ignored(selector):
    selector.set_focus(Source.TAG)
    selector.set_tag_text('v2.0')
    assert selector.selected_tag is None
    assert selector.candidate == ''


def test_branch_focused_without_selection(selector):
    selector.set_expression('abc123')
    selector.set_focus(Source.BRANCH)
    assert selector.candidate == ''
    with pytest.raises(RevisionNotFound):
        selector.resolve(selector.candidate)


def test_branch_matched_by_name(selector):
    selector.set_branches(BRANCHES)
    selector.set_branch_text('origin/main')
    assert selector.candidate == ''

    selector.set_focus(Source.BRANCH)
    assert selector.candidate == 'sha-origin'


def test_candidate_follows_most_recent_focus(selector):
    selector.set_tags(TAGS)
    selector.set_branches(BRANCHES)
    selector.set_expression('abc123')
    selector.set_tag_text('v1.0')
    selector.set_branch_text('main')

    expect = {
        Source.EXPRESSION: 'abc123',
        Source.TAG: 'sha1',
        Source.BRANCH: 'sha-main',
    }
    for source in (
        Source.TAG,
        Source.BRANCH,
        Source.EXPRESSION,
        Source.BRANCH,
        Source.BRANCH,
        Source.TAG,
        Source.EXPRESSION,
    ):
        selector.set_focus(source)
        assert selector.candidate == expect[source]


def test_list_updates_apply_only_to_focused_list(selector):
    selector.set_focus(Source.BRANCH)
    selector.tag_list_updated(TAGS[0])
    assert selector.selected_tag == TAGS[0]
    assert selector.candidate == ''

    selector.branch_list_updated(BRANCHES[1])
    assert selector.candidate == 'sha-origin'

    selector.branch_list_updated(None)
    assert selector.candidate == ''


def test_set_focus_is_idempotent(selector):
    selector.set_tags(TAGS)
    selector.tag_list_updated(TAGS[1])
    selector.set_focus(Source.TAG)
    selector.set_focus(Source.TAG)
    assert selector.source == Source.TAG
    assert selector.candidate == 'sha2'


def test_set_focus_unknown_source(selector):
    with pytest.raises(ValueError):
        selector.set_focus('clipboard')
    assert selector.source == Source.EXPRESSION


def test_candidate_changed_signal(selector):
    changed = Mock()
    selector.candidate_changed.connect(changed)
    selector.set_expression('abc123')
    selector.set_expression('abc123 ')
    changed.assert_called_once_with('abc123')


def test_confirm_returns_candidate_verbatim(selector):
    confirmed = Mock()
    selector.confirmed.connect(confirmed)
    selector.set_expression('HEAD~2')
    assert selector.confirm() == 'HEAD~2'
    confirmed.assert_called_once_with('HEAD~2')


def test_confirm_empty_candidate(selector):
    selector.set_focus(Source.BRANCH)
    assert selector.confirm() == ''


def test_resolve_empty_fails(selector):
    for value in ('', '   ', None):
        with pytest.raises(RevisionNotFound):
            selector.resolve(value)


def test_resolve_empty_does_not_call_resolver():
    resolver = Mock(return_value='deadbeef')
    selector = revselect.create(resolver)
    with pytest.raises(RevisionNotFound):
        selector.resolve('')
    resolver.assert_not_called()


def test_resolve_delegates_exactly(selector, resolved):
    assert selector.resolve('abc123') == resolved['abc123']
    assert selector.resolve('HEAD~2') == 'head-minus-two'


def test_resolve_unknown_expression(selector):
    with pytest.raises(RevisionNotFound) as excinfo:
        selector.resolve('no-such-ref')
    assert excinfo.value.expression == 'no-such-ref'


def test_selected_revision(selector):
    selector.set_tags(TAGS)
    selector.set_focus(Source.TAG)
    assert selector.selected_revision() is None

    selector.set_tag_text('v2.0')
    assert selector.selected_revision() == 'sha2-full'


def test_find_ref():
    assert revselect.find_ref(TAGS, 'v1.0') == TAGS[0]
    assert revselect.find_ref(TAGS, 'v1') is None
    assert revselect.find_ref([], 'v1.0') is None


def test_find_ref_returns_first_duplicate():
    entries = [RefEntry('dup', 'first'), RefEntry('dup', 'second')]
    assert revselect.find_ref(entries, 'dup').oid == 'first'
