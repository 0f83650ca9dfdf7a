import json

import pytest
from swapi_cli import decoder
from swapi_cli.errors import DecodeError
from swapi_cli.models import CharacterRecord

LUKE = {
    "name": "Luke Skywalker",
    "height": "172",
    "mass": "77",
    "birth_year": "19BBY",
    "eye_color": "blue",
    "url": "https://swapi.dev/api/people/1/",
}


def test_decode_one_maps_fields():
    rec = decoder.decode_one(json.dumps(LUKE))
    assert rec == CharacterRecord(name="Luke Skywalker", birth_year="19BBY", height="172", eye_color="blue")


def test_decode_one_missing_keys_are_none():
    rec = decoder.decode_one('{"name": "R2-D2", "eye_color": null}')
    assert rec.name == "R2-D2"
    assert rec.birth_year is None
    assert rec.height is None
    assert rec.eye_color is None


def test_decode_one_converts_scalars_to_text():
    rec = decoder.decode_one('{"name": "IG-88", "height": 200}')
    assert rec.height == "200"


@pytest.mark.parametrize("body", ["null", "[]", "42", "not json", ""])
def test_decode_one_rejects_unusable_payload(body):
    with pytest.raises(DecodeError):
        decoder.decode_one(body)


def test_decode_many_preserves_order_and_length():
    results = [
        {"name": "Darth Vader", "birth_year": "41.9BBY", "height": "202", "eye_color": "yellow"},
        {"name": "Darth Maul", "height": "175"},
    ]
    records = decoder.decode_many(json.dumps({"count": 2, "next": None, "results": results}))
    assert len(records) == len(results)
    assert [r.name for r in records] == ["Darth Vader", "Darth Maul"]
    assert records[1].eye_color is None


def test_decode_many_empty_results_is_an_error():
    with pytest.raises(DecodeError):
        decoder.decode_many('{"count": 0, "results": []}')


@pytest.mark.parametrize("body", ['{"count": 0}', '{"results": null}', "null", '{"results": [null]}'])
def test_decode_many_rejects_bad_envelope(body):
    with pytest.raises(DecodeError):
        decoder.decode_many(body)
