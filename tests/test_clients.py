import pytest

from banco.clients import Client


@pytest.fixture(autouse=True)
def fresh_ids():
    Client.reset_ids(0)
    yield
    Client.reset_ids(0)


def test_first_client_gets_id_one():
    client = Client("Ana", "Calle 1")
    assert client.id == 1


def test_ids_are_sequential():
    first = Client("Ana", "Calle 1")
    second = Client("Luis", "Calle 2")
    assert second.id == first.id + 1


def test_reset_ids_sets_next_identifier():
    Client.reset_ids(41)
    first = Client("Ana", "Calle 1")
    Client.reset_ids(41)
    again = Client("Luis", "Calle 2")
    assert first.id == again.id
    assert first.id > 41


def test_to_dict_uses_stored_keys():
    client = Client("Ana", "Calle 1")
    assert client.to_dict() == {"id": client.id, "nombre": "Ana", "direccion": "Calle 1"}


def test_round_trip_through_dict():
    client = Client("Ana", "Calle 1")
    restored = Client.from_dict(client.to_dict())
    assert restored == client


def test_from_dict_advances_counter():
    loaded = Client.from_dict({"id": 25, "nombre": "Ana", "direccion": "Calle 1"})
    following = Client("Luis", "Calle 2")
    assert following.id == loaded.id + 1


def test_from_dict_with_lower_id_keeps_counter():
    Client.reset_ids(30)
    Client.from_dict({"id": 5, "nombre": "Ana", "direccion": "Calle 1"})
    following = Client("Luis", "Calle 2")
    assert following.id > 30


def test_from_dict_missing_field_raises():
    with pytest.raises(KeyError):
        Client.from_dict({"id": 3, "nombre": "Ana"})


def test_attributes_are_mutable():
    client = Client("Ana", "Calle 1")
    client.name = "Ana Maria"
    client.address = "Calle 9"
    assert client.to_dict()["nombre"] == "Ana Maria"
    assert client.to_dict()["direccion"] == "Calle 9"