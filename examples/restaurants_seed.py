"""Carrega o dataset de restaurantes e executa a demonstração completa."""

import sys
from pathlib import Path

from mongofacade import CollectionFacade, connect
from mongofacade.demo import load_restaurants, run_demo


def main(dataset: Path) -> None:
    facade = CollectionFacade()
    with connect() as db:
        facade.drop(db, "restaurants")
        ids = facade.insert_many(db, "restaurants", load_restaurants(dataset))
        print(f"{len(ids)} restaurantes carregados")
        run_demo(db, facade)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit("uso: python examples/restaurants_seed.py dataset.json")
    main(Path(sys.argv[1]))
