from mpbar.decor.decorator import WC, Statistics, string_width
from mpbar.decor.basic import name
from mpbar.decor.wrappers import (
    MetaWrapper,
    OnAbortWrapper,
    conditional,
    meta,
    on_abort,
    on_abort_meta,
    on_complete,
    on_complete_meta,
    on_complete_meta_or_on_abort_meta,
    on_complete_or_on_abort,
    on_condition,
    on_predicate,
    predicative,
)


def test_meta_applies_fn_and_keeps_width():
    d = meta(name("foo"), str.upper)
    text, width = d.decor(Statistics())
    assert text == "FOO"
    assert width == 3


def test_meta_ansi_does_not_change_width():
    d = meta(name("foo"), lambda s: "\x1b[31m" + s + "\x1b[0m")
    text, width = d.decor(Statistics())
    assert text == "\x1b[31mfoo\x1b[0m"
    assert width == 3


def test_wrappers_of_none_are_none():
    assert meta(None, str.upper) is None
    assert on_abort(None, "x") is None
    assert on_abort_meta(None, str.upper) is None
    assert on_complete(None, "x") is None
    assert on_complete_meta(None, str.upper) is None
    assert on_complete_or_on_abort(None, "x") is None
    assert on_complete_meta_or_on_abort_meta(None, str.upper) is None


def test_unwrap_returns_inner():
    inner = name("foo")
    assert meta(inner, str.upper).unwrap() is inner
    assert on_abort(inner, "x").unwrap() is inner
    assert on_complete(inner, "x").unwrap() is inner
    assert on_abort_meta(inner, str.upper).unwrap() is inner
    assert on_complete_meta(inner, str.upper).unwrap() is inner


def test_on_complete_switches_message():
    d = on_complete(name("foo"), "done")
    assert d.decor(Statistics())[0] == "foo"
    assert d.decor(Statistics(completed=True))[0] == "done"


def test_on_abort_switches_message():
    d = on_abort(name("foo"), "abort")
    assert d.decor(Statistics())[0] == "foo"
    assert d.decor(Statistics(aborted=True))[0] == "abort"
    assert d.decor(Statistics(completed=True))[0] == "foo"


def test_message_uses_inner_width_config():
    d = on_complete(name("foo", WC(w=10)), "done")
    text, width = d.decor(Statistics(completed=True))
    assert width == 10
    assert string_width(text) == 10
    assert text.endswith("done") and text.strip() == "done"


def test_meta_variants_only_on_event():
    d = on_complete_meta(name("foo"), str.upper)
    assert d.decor(Statistics())[0] == "foo"
    assert d.decor(Statistics(completed=True))[0] == "FOO"
    a = on_abort_meta(name("foo"), str.upper)
    assert a.decor(Statistics())[0] == "foo"
    assert a.decor(Statistics(aborted=True))[0] == "FOO"


def test_on_complete_or_on_abort():
    d = on_complete_or_on_abort(name("foo"), "end")
    assert d.decor(Statistics())[0] == "foo"
    assert d.decor(Statistics(completed=True))[0] == "end"
    assert d.decor(Statistics(aborted=True))[0] == "end"


def test_on_complete_meta_or_on_abort_meta():
    d = on_complete_meta_or_on_abort_meta(name("foo"), str.upper)
    assert d.decor(Statistics())[0] == "foo"
    assert d.decor(Statistics(completed=True))[0] == "FOO"
    assert d.decor(Statistics(aborted=True))[0] == "FOO"


def test_wrapper_types():
    assert isinstance(meta(name("a"), str.upper), MetaWrapper)
    assert isinstance(on_abort(name("a"), "b"), OnAbortWrapper)
    assert on_abort(name("a"), "b").message == "b"


def test_conditional_and_predicative():
    a, b = name("a"), name("b")
    assert conditional(True, a, b) is a
    assert conditional(False, a, b) is b
    assert predicative(lambda: True, a, b) is a
    assert predicative(lambda: False, a, b) is b


def test_on_condition_and_on_predicate():
    a = name("a")
    assert on_condition(a, True) is a
    assert on_condition(a, False) is None
    assert on_predicate(a, lambda: True) is a
    assert on_predicate(a, lambda: False) is None