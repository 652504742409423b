"""Inserção de modelos Pydantic com CollectionFacade."""

from pydantic import BaseModel

from mongofacade import CollectionFacade, MongoSettings, connect, descending

SETTINGS = MongoSettings(database="examples")


class Profile(BaseModel):
    id: str
    name: str
    active: bool = True


def main() -> None:
    facade = CollectionFacade()
    with connect(SETTINGS) as db:
        facade.drop(db, "profiles")
        facade.insert_one(db, "profiles", Profile(id="p1", name="Alice"))
        facade.insert_many(db, "profiles", [{"id": "p2", "name": "Bob", "active": False}])

        print("Perfis ordenados por nome:")
        facade.find_by_filter_sorted(db, "profiles", {}, descending("name"))


if __name__ == "__main__":
    main()
