from collections import OrderedDict

import mongomock
import pytest
from pydantic import BaseModel

from mongofacade import CollectionFacade, to_document
from mongofacade.model_adapters import pydantic_model_dump


class Profile(BaseModel):
    id: str
    name: str
    active: bool = True


class DocObject:
    def __init__(self, doc_id, name):
        self.doc_id = doc_id
        self.name = name
        self._hidden = "x"


class NoSlots:
    __slots__ = ()


def test_mapping_is_copied():
    source = OrderedDict([("b", 1), ("a", 2)])
    doc = to_document(source)
    assert doc == {"b": 1, "a": 2}
    assert list(doc) == ["b", "a"]
    assert doc is not source


def test_pydantic_model_dump():
    assert pydantic_model_dump(Profile(id="p1", name="Alice")) == {
        "id": "p1",
        "name": "Alice",
        "active": True,
    }


def test_pydantic_model_dump_dict_branch():
    class Dummy:
        def dict(self):
            return {"value": 7}

    assert pydantic_model_dump(Dummy()) == {"value": 7}


def test_plain_object_public_attributes():
    assert to_document(DocObject("doc", "value")) == {"doc_id": "doc", "name": "value"}


def test_unsupported_object_rejected():
    with pytest.raises(TypeError):
        to_document(NoSlots())


def test_insert_pydantic_model():
    db = mongomock.MongoClient()["local"]
    facade = CollectionFacade()
    facade.insert_one(db, "profiles", Profile(id="p1", name="Alice"))
    facade.insert_many(db, "profiles", [{"id": "p2", "name": "Bob", "active": False}])
    docs = facade.find_by_filter(db, "profiles", {"active": True})
    assert [doc["id"] for doc in docs] == ["p1"]


def test_pydantic_model_dump_type_error():
    with pytest.raises(TypeError):
        pydantic_model_dump(NoSlots())
