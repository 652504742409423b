"""Operações básicas com CollectionFacade usando dicionários."""

from mongofacade import CollectionFacade, MongoSettings, connect, eq

SETTINGS = MongoSettings(database="examples")


def main() -> None:
    facade = CollectionFacade()
    with connect(SETTINGS) as db:
        facade.drop(db, "docs")
        facade.insert_many(
            db,
            "docs",
            [
                {"_id": "doc-1", "value": 10},
                {"value": 20, "tags": ["x", "y"]},
            ],
        )

        print("Documentos:")
        facade.find_all(db, "docs")

        print("Filtrados:")
        facade.find_by_filter(db, "docs", {"value": {"$gt": 10}})

        facade.update_one(db, "docs", eq("_id", "doc-1"), {"$set": {"value": 11}})
        facade.delete_one(db, "docs", eq("value", 20))


if __name__ == "__main__":
    main()
