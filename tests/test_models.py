import uuid

from premise.models import Entity, Trackable, display_name, is_trackable
from sample_models import Counter, Note, Widget


def test_display_names():
    assert display_name(Widget, "id") == "Unique Identifier"
    assert display_name(Note, "created_on") == "Created On"
    assert display_name(Note, "modified_by") == "Modified By"
    assert display_name(Widget, "name") == "name"


def test_trackable_detection():
    assert is_trackable(Note)
    assert not is_trackable(Widget)
    assert isinstance(Note(body="x"), Trackable)


def test_records_satisfy_the_entity_contract():
    assert isinstance(Widget(name="x"), Entity)
    assert isinstance(Counter(label="x"), Entity)


def test_to_dict_serializes_keys_and_respects_exclude():
    key = uuid.uuid4()
    widget = Widget(id=key, name="gear")

    assert widget.to_dict() == {"id": str(key), "name": "gear"}
    assert widget.to_dict(exclude={"id"}) == {"name": "gear"}
