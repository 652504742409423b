import io
from unittest.mock import MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError
from pymongo.results import DeleteResult, UpdateResult

from mongofacade import CollectionFacade, eq


def failing_db(method, error):
    db = MagicMock()
    getattr(db.__getitem__.return_value, method).side_effect = error
    return db


def test_insert_propagates_driver_error():
    db = failing_db("insert_one", ServerSelectionTimeoutError("no servers"))
    with pytest.raises(ServerSelectionTimeoutError):
        CollectionFacade().insert_one(db, "test", {"greeting": "Hello"})


def test_update_propagates_driver_error(capsys):
    db = failing_db("update_one", OperationFailure("unknown operator: $sett"))
    with pytest.raises(OperationFailure):
        CollectionFacade().update_one(db, "test", eq("a", 1), {"$sett": {"a": 2}})
    assert capsys.readouterr().out == ""


def test_delete_propagates_driver_error():
    db = failing_db("delete_one", ServerSelectionTimeoutError("timed out"))
    with pytest.raises(ServerSelectionTimeoutError):
        CollectionFacade().delete_one(db, "test", eq("a", 1))


def test_find_propagates_driver_error():
    db = failing_db("find", OperationFailure("bad query"))
    with pytest.raises(OperationFailure):
        CollectionFacade().find_by_filter(db, "test", {"$bad": 1})


def test_collection_is_looked_up_on_every_call():
    db = MagicMock()
    facade = CollectionFacade()
    facade.insert_one(db, "first", {"a": 1})
    facade.insert_one(db, "second", {"a": 2})
    assert [c.args[0] for c in db.__getitem__.call_args_list] == ["first", "second"]


def test_unacknowledged_writes_are_summarized():
    db = MagicMock()
    collection = db.__getitem__.return_value
    collection.update_one.return_value = UpdateResult(None, False)
    collection.delete_one.return_value = DeleteResult(None, False)
    out = io.StringIO()
    facade = CollectionFacade(out=out)
    facade.update_one(db, "test", eq("a", 1), {"$set": {"a": 2}})
    facade.delete_one(db, "test", eq("a", 2))
    assert out.getvalue().splitlines() == [
        "UpdateResult(acknowledged=False)",
        "DeleteResult(acknowledged=False)",
    ]
