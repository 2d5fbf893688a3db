import uuid
from types import SimpleNamespace

from premise.repositories import PassthroughKeyGenerator, UuidKeyGenerator, key_generator_for


def test_strategy_follows_key_type():
    assert isinstance(key_generator_for(uuid.UUID), UuidKeyGenerator)
    assert isinstance(key_generator_for(int), PassthroughKeyGenerator)
    assert isinstance(key_generator_for(str), PassthroughKeyGenerator)
    assert isinstance(key_generator_for(object), PassthroughKeyGenerator)


def test_uuid_generator_overwrites_existing_keys():
    preset = uuid.uuid4()
    records = [SimpleNamespace(id=preset) for _ in range(3)]

    UuidKeyGenerator().assign(records)

    keys = [record.id for record in records]
    assert preset not in keys
    assert len(set(keys)) == 3
    assert all(isinstance(key, uuid.UUID) for key in keys)


def test_passthrough_generator_leaves_keys_alone():
    record = SimpleNamespace(id=7)

    PassthroughKeyGenerator().assign([record])

    assert record.id == 7
