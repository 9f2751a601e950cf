"""
Tests for TranslationUpdated events
"""
import pytest

from translatable.core.events import EventDispatcher, TranslationUpdated, dispatcher
from translatable.core.exceptions import AttributeNotTranslatable

from translatable_models import MutatorModel


def test_fires_an_event_when_a_translation_is_updated(test_model, events):
    test_model.set_translation("name", "en", "EnglishTestValue")

    assert events == [TranslationUpdated(test_model, "name", "en", "", "EnglishTestValue")]


def test_event_carries_the_previous_value(test_model, events):
    test_model.set_translation("name", "en", "first")
    test_model.set_translation("name", "en", "second")

    assert [(e.old_value, e.new_value) for e in events] == [("", "first"), ("first", "second")]


def test_one_event_per_locale_when_setting_many(test_model, events):
    test_model.set_translations("name", {"nl": "hallo", "en": "hello"})

    assert [(e.locale, e.new_value) for e in events] == [("nl", "hallo"), ("en", "hello")]


def test_prefixed_assignment_fires_an_event(test_model, events):
    test_model.trans_description = "hello"

    assert len(events) == 1
    assert events[0].key == "description"
    assert events[0].locale == "en"


def test_event_carries_the_mutated_value(events):
    model = MutatorModel()
    model.set_translation("name", "en", "hello")

    assert events[0].new_value == "I just mutated hello"


def test_no_event_when_attribute_is_not_translatable(test_model, events):
    with pytest.raises(AttributeNotTranslatable):
        test_model.set_translation("untranslated", "en", "value")

    assert events == []


def test_forgetting_does_not_fire_events(test_model):
    test_model.set_translation("name", "en", "hello")

    with dispatcher.listen() as events:
        test_model.forget_translation("name", "en")

    assert events == []


def test_dispatcher_calls_listeners_in_order():
    local = EventDispatcher()
    calls = []
    local.subscribe(lambda event: calls.append(("first", event.key)))

    @local.subscribe
    def second(event):
        calls.append(("second", event.key))

    local.emit(TranslationUpdated(None, "name", "en", "", "hello"))
    local.unsubscribe(second)
    local.emit(TranslationUpdated(None, "description", "en", "", "hello"))

    assert calls == [("first", "name"), ("second", "name"), ("first", "description")]


def test_listener_errors_propagate(test_model):
    def failing(event):
        raise RuntimeError("listener failed")

    dispatcher.subscribe(failing)
    try:
        with pytest.raises(RuntimeError):
            test_model.set_translation("name", "en", "hello")
    finally:
        dispatcher.unsubscribe(failing)
